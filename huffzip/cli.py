"""Command-line interface: compress or decompress files, optionally with a password."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Sequence

from .compressor import CompressionError, CompressionStats, compress, decompress
from .encryptor import decrypt, encrypt

_PROG = "huffzip"


def usage(name: str) -> str:
    """Return the usage text for a program called ``name``."""
    return (
        "\nHuffZip - File Compressor\n\n"
        f"  {name} -c <input> <output.huf>         Compress\n"
        f"  {name} -d <input.huf> <output>         Decompress\n"
        f"  {name} -c <input> <output.huf> -p pass Encrypt+Compress\n"
        f"  {name} -d <input.huf> <output> -p pass Decrypt+Decompress\n\n"
    )


def _find_password(options: Sequence[str]) -> str:
    password = ""
    tokens = iter(options)
    for token in tokens:
        if token == "-p":
            value = next(tokens, None)
            if value is not None:
                password = value
    return password


def _read_bytes(path: str) -> bytes:
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        raise CompressionError(f"Cannot open: {path}") from exc


def _report_compressed(stats: CompressionStats) -> None:
    print("Compressed!")
    print(f"   Original  : {stats.original_size} bytes")
    print(f"   Compressed: {stats.compressed_size} bytes")
    print(f"   Ratio     : {stats.ratio:g}%")


def _report_decompressed(recovered: int) -> None:
    print("Decompressed!")
    print(f"   Recovered : {recovered} bytes")


def _error(exc: Exception) -> int:
    print(f"[Error] {exc}", file=sys.stderr)
    return 1


def _run_compress(input_path: str, output_path: str, password: str) -> int:
    print(f"\nCompressing: {input_path} -> {output_path}")
    try:
        if password:
            print("Encrypting...")
            encrypted = encrypt(_read_bytes(input_path), password)
            tmp = Path(input_path + ".tmp")
            tmp.write_bytes(encrypted)
            try:
                stats = compress(tmp, output_path)
            finally:
                tmp.unlink(missing_ok=True)
        else:
            stats = compress(input_path, output_path)
    except (CompressionError, OSError, ValueError) as exc:
        return _error(exc)
    _report_compressed(stats)
    return 0


def _run_decompress(input_path: str, output_path: str, password: str) -> int:
    print(f"\nDecompressing: {input_path} -> {output_path}")
    try:
        if not password:
            _report_decompressed(decompress(input_path, output_path))
            return 0
        print("Decrypting...")
        tmp = Path(output_path + ".tmp")
        try:
            _report_decompressed(decompress(input_path, tmp))
            Path(output_path).write_bytes(decrypt(tmp.read_bytes(), password))
        finally:
            tmp.unlink(missing_ok=True)
    except (CompressionError, OSError, ValueError) as exc:
        return _error(exc)
    print("Done!")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line; return the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 3:
        print(usage(_PROG), end="")
        return 1

    mode, input_path, output_path = args[:3]
    password = _find_password(args[3:])

    if mode == "-c":
        return _run_compress(input_path, output_path, password)
    if mode == "-d":
        return _run_decompress(input_path, output_path, password)

    print(usage(_PROG), end="")
    return 1


if __name__ == "__main__":
    sys.exit(main())
"""Huffman file compression using the ``.huf`` container format.

Layout of a ``.huf`` file::

    b"HUFF" | padding bits (1 byte) | tree size (uint32, little endian)
    | serialised tree | packed code bits (MSB first)
"""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass
from itertools import islice
from pathlib import Path
from typing import Iterator, Union

from .huffman import (
    CorruptTreeError,
    build_frequency_table,
    build_tree,
    deserialize_tree,
    generate_codes,
    serialize_tree,
)

PathLike = Union[str, "os.PathLike[str]"]

MAGIC = b"HUFF"
_HEADER = struct.Struct("<4sBI")
HEADER_SIZE = _HEADER.size


class CompressionError(Exception):
    """Raised when compression or decompression cannot be carried out."""


@dataclass(frozen=True)
class CompressionStats:
    """Sizes before and after compressing one file."""

    original_size: int
    compressed_size: int

    @property
    def ratio(self) -> float:
        """Space saved, as a percentage of the original size."""
        return 100.0 * (1.0 - self.compressed_size / self.original_size)


class BitWriter:
    """Packs bits into bytes, most significant bit first."""

    def __init__(self) -> None:
        self._out = bytearray()
        self._buffer = 0
        self._count = 0

    def write_bit(self, bit: int) -> None:
        """Append one bit (only its lowest bit is used)."""
        self._buffer = ((self._buffer << 1) | (bit & 1)) & 0xFF
        self._count += 1
        if self._count == 8:
            self.flush()

    def write_bits(self, bits: str) -> None:
        """Append bits given as a string of '0' and '1' characters."""
        for char in bits:
            self.write_bit(1 if char == "1" else 0)

    def flush(self) -> None:
        """Emit a partially filled byte, padded with zero bits on the right."""
        if self._count:
            self._out.append((self._buffer << (8 - self._count)) & 0xFF)
            self._buffer = 0
            self._count = 0

    def padding_bits(self) -> int:
        """Number of zero bits a flush would add to complete the current byte."""
        return 0 if self._count == 0 else 8 - self._count

    def getvalue(self) -> bytes:
        """Return the bytes completed so far (call flush first for the tail)."""
        return bytes(self._out)


class BitReader:
    """Iterates over the bits of a byte string, most significant bit first."""

    def __init__(self, data: bytes, start: int = 0) -> None:
        self._data = data
        self._start = start

    def __iter__(self) -> Iterator[int]:
        for byte in memoryview(self._data)[self._start:]:
            for shift in range(7, -1, -1):
                yield (byte >> shift) & 1


def compress_bytes(data: bytes) -> bytes:
    """Compress ``data`` into a ``.huf`` container."""
    if not data:
        raise CompressionError("File empty!")

    root = build_tree(build_frequency_table(data))
    codes = generate_codes(root)
    tree_data = serialize_tree(root)

    writer = BitWriter()
    for byte in data:
        writer.write_bits(codes[byte])
    padding = writer.padding_bits()
    writer.flush()

    return _HEADER.pack(MAGIC, padding, len(tree_data)) + tree_data + writer.getvalue()


def decompress_bytes(data: bytes) -> bytes:
    """Recover the original bytes from a ``.huf`` container."""
    if len(data) < HEADER_SIZE or data[: len(MAGIC)] != MAGIC:
        raise CompressionError("Not a valid .huf file!")

    _, padding, tree_size = _HEADER.unpack_from(data)
    body = data[HEADER_SIZE:]
    try:
        root, _ = deserialize_tree(body[:tree_size])
    except CorruptTreeError as exc:
        raise CompressionError(str(exc)) from exc

    payload = body[tree_size:]
    total_bits = max(len(payload) * 8 - padding, 0)

    out = bytearray()
    current = root
    for bit in islice(BitReader(payload), total_bits):
        if current.is_leaf():
            out.append(current.ch)
            current = root
            continue
        current = current.right if bit else current.left
        if current is None:
            raise CompressionError("Corrupt file!")
        if current.is_leaf():
            out.append(current.ch)
            current = root
    return bytes(out)


def _read_file(path: PathLike) -> bytes:
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        raise CompressionError(f"File opened failed: {os.fspath(path)}") from exc


def _write_file(path: PathLike, data: bytes) -> None:
    try:
        Path(path).write_bytes(data)
    except OSError as exc:
        raise CompressionError("Write failed!") from exc


def compress(input_path: PathLike, output_path: PathLike) -> CompressionStats:
    """Compress the file at ``input_path`` into ``output_path``."""
    data = _read_file(input_path)
    packed = compress_bytes(data)
    _write_file(output_path, packed)
    return CompressionStats(original_size=len(data), compressed_size=len(packed))


def decompress(input_path: PathLike, output_path: PathLike) -> int:
    """Decompress ``input_path`` into ``output_path``; return the bytes recovered."""
    recovered = decompress_bytes(_read_file(input_path))
    _write_file(output_path, recovered)
    return len(recovered)
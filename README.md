# huffzip

A small file compressor built on Huffman coding. It turns any non-empty file
into a `.huf` archive and restores it byte for byte. An optional password
scrambles the data with a repeating XOR key before it is compressed.

## Install

```
pip install .
```

## Command line

```
huffzip -c <input> <output.huf>              # compress
huffzip -d <input.huf> <output>              # decompress
huffzip -c <input> <output.huf> -p <pass>    # scramble, then compress
huffzip -d <input.huf> <output> -p <pass>    # decompress, then unscramble
```

The same commands can be run as `python -m huffzip.cli ...`.

The command exits with status 0 on success and 1 on any error, which is
printed to standard error as `[Error] ...`. With fewer than three arguments,
or a mode other than `-c` or `-d`, it prints the usage text and exits with 1.

After compressing it reports the original size, the compressed size and the
space saved as a percentage; after decompressing it reports the number of
bytes recovered.

With `-p`, a temporary file is used along the way: `<input>.tmp` when
compressing and `<output>.tmp` when decompressing. It is removed afterwards.
A wrong password is not detected: decompression succeeds and the output is
simply scrambled data.

The password scrambling is a plain XOR with a 32-byte key derived from the
password. It hides the contents from a casual look but is not real
encryption.

## Library

```python
from huffzip.compressor import compress_bytes, decompress_bytes
from huffzip.encryptor import encrypt, decrypt

packed = compress_bytes(b"abracadabra")
assert decompress_bytes(packed) == b"abracadabra"

password = "password"
scrambled = encrypt(b"hello", password)
assert decrypt(scrambled, password) == b"hello"
```

`huffzip.compressor` also works on paths:

- `compress(input_path, output_path)` returns a `CompressionStats` with
  `original_size`, `compressed_size` and a `ratio` property (percentage of
  space saved).
- `decompress(input_path, output_path)` returns the number of bytes recovered.

Both these and the byte functions raise `CompressionError` when a file cannot
be read or written, the input is empty, or the data is not a valid or is a
corrupt archive. `BitWriter` and `BitReader` pack and unpack bits, most
significant bit first.

`huffzip.encryptor` offers `derive_key`, `encrypt` and `decrypt`; an empty
password raises `ValueError`.

The lower-level pieces live in `huffzip.huffman`: `HuffNode`,
`build_frequency_table`, `build_tree`, `generate_codes` (symbol to `'0'`/`'1'`
string), `serialize_tree` and `deserialize_tree` (returns the root and the
index after the tree). Truncated tree data raises `CorruptTreeError`.

## Archive format

| Offset | Size | Contents                                   |
|--------|------|--------------------------------------------|
| 0      | 4    | magic `HUFF`                               |
| 4      | 1    | number of padding bits in the last byte    |
| 5      | 4    | tree size in bytes, little-endian          |
| 9      | n    | serialised tree (pre-order, `0` = internal node, `1` + byte = leaf) |
| 9 + n  | rest | Huffman-coded bit stream, most significant bit first |

## Tests

```
pip install .[test]
pytest
```
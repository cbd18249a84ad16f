# huffzip

huffzip compresses files with static Huffman coding. It can also turn a
compressed file back into the original bytes.

## Installation

```
pip install .
```

## Command line

Compress a file:

```
huffzip input.txt output.huf
```

Decompress it again:

```
huffzip output.huf restored.txt -d
```

When compressing, the tool prints diagnostics to standard output:

- each symbol with its count, from least to most frequent;
- the code tree;
- the root weight;
- the total number of bits taken by the encoded data.

When decompressing, it prints the size of the compressed input in bytes.

The command returns exit status 1 in these cases:

- the arguments are wrong, for which it prints `provide file name`;
- a file cannot be opened, for which it prints `error while opening file`;
- the data cannot be encoded or decoded, for which it prints `error: ...`.

## Format

A compressed file is made of three parts, in this order:

1. A padding prefix of `1` bits ended by a single `0` bit. The prefix is
   between 1 and 8 bits long, and it makes the whole stream fill a whole
   number of bytes.
2. The code tree in pre-order. An internal node is written as a `0` bit. A leaf
   is written as a `1` bit followed by the 8-bit symbol.
3. The Huffman code of every input byte. A `0` bit goes left and a `1` bit goes
   right.

## Library use

```python
from huffzip.cli import encode, decode

packed = encode(b"abracadabra")
assert decode(packed) == b"abracadabra"
```

Lower-level pieces are also available.

`huffzip.tree` provides:

- the node types `Leaf` and `Internal`, and `Code`;
- `count_symbols`, which gives the leaves sorted by weight;
- `build_tree`, which uses the two-queue method;
- `code_table`, which maps each symbol to its code;
- `encoded_tree_bits`;
- `write_tree` and `read_tree`;
- `format_tree`.

`huffzip.bitio` provides:

- `BitWriter`, which writes bits most significant first to a binary stream and
  is usable as a context manager;
- `BitReader`, which reads bits and bytes from a `bytes` object;
- `format_bits`.

## Limitations

- The input to compress must hold at least two distinct byte values. Empty
  files, and files made of one repeated byte, are refused.
- The compressed format has no magic number, no length field and no checksum.
  When decoding, trailing bits that do not complete a code are ignored.
  Corrupted data is not detected beyond a truncated or malformed tree.
- Whole files are read into memory. There is no streaming mode.

## Running the tests

```
pip install .[test]
pytest
```
"""Command-line compression and decompression of files with Huffman coding.

The compressed layout is a padding prefix (ones ended by a single zero) that
byte-aligns the whole output, then the pre-order encoded tree, then the code
of every input byte.
"""

from __future__ import annotations

import io
import sys
from collections.abc import Sequence

from huffzip.bitio import BitReader, BitWriter
from huffzip.tree import (
    Internal,
    Leaf,
    build_tree,
    code_table,
    count_symbols,
    encoded_tree_bits,
    format_tree,
    write_tree,
)


def _padding_bits(total_bits: int) -> int:
    """Length of the prefix that makes ``total_bits`` plus the prefix a whole number of bytes."""
    return (-total_bits) % 8 or 8


def encode(data: bytes) -> bytes:
    """Compress ``data``; it must hold at least two distinct byte values."""
    root = build_tree(count_symbols(data))
    table = code_table(root)
    payload_bits = sum(table[byte].length for byte in data)
    pad = _padding_bits(payload_bits + encoded_tree_bits(root))

    buffer = io.BytesIO()
    with BitWriter(buffer) as writer:
        writer.write_bits(((1 << (pad - 1)) - 1) << 1, pad)
        write_tree(writer, root)
        for byte in data:
            code = table[byte]
            writer.write_bits(code.bits, code.length)
    return buffer.getvalue()


def decode(data: bytes) -> bytes:
    """Decompress bytes produced by ``encode``.

    Bits left over at the end that do not complete a code are ignored.
    """
    reader = BitReader(data)
    try:
        while reader.read_bit() == 1:
            pass
        from huffzip.tree import read_tree

        root = read_tree(reader)
    except EOFError as exc:
        raise ValueError("data ends before the code tree is complete") from exc
    if isinstance(root, Leaf):
        raise ValueError("encoded tree has no inner node")

    out = bytearray()
    node: Internal | Leaf = root
    while not reader.exhausted():
        assert isinstance(node, Internal)
        node = node.right if reader.read_bit() else node.left
        if isinstance(node, Leaf):
            out.append(node.symbol)
            node = root
    return bytes(out)


def _report(data: bytes) -> None:
    leaves = count_symbols(data)
    root = build_tree(leaves)
    table = code_table(root)
    for leaf in leaves:
        print(f"'{chr(leaf.symbol)}' {leaf.weight}")
    print(format_tree(root), end="")
    print(f"Huffman tree built. Root weight: {root.weight}")
    print(f"bits size {sum(table[byte].length for byte in data)}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command: ``INPUT OUTPUT`` compresses, ``INPUT OUTPUT -d`` decompresses."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) == 2:
        decompress = False
    elif len(args) == 3 and args[2] == "-d":
        decompress = True
    else:
        if len(args) >= 3:
            print(args[2])
        print("provide file name", file=sys.stderr)
        return 1

    source, target = args[0], args[1]
    try:
        with open(source, "rb") as handle:
            data = handle.read()
    except OSError:
        print("error while opening file", file=sys.stderr)
        return 1

    try:
        if decompress:
            print(f"size {len(data)}")
            result = decode(data)
        else:
            result = encode(data)
            _report(data)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    try:
        with open(target, "wb") as handle:
            handle.write(result)
    except OSError:
        print("error while opening file", file=sys.stderr)
        return 1
    return 0
"""Huffman tree construction, code tables and tree serialisation."""

from __future__ import annotations

from collections import Counter, deque
from dataclasses import dataclass, field
from typing import Union

from huffzip.bitio import BitReader, BitWriter, format_bits

_MAX_DEPTH = 255


@dataclass(frozen=True)
class Leaf:
    """A symbol (a byte value) with its occurrence count."""

    symbol: int
    weight: int = 0


@dataclass(frozen=True)
class Internal:
    """An inner node; its weight is the sum of its children's weights."""

    left: Node
    right: Node
    weight: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "weight", self.left.weight + self.right.weight)


Node = Union[Leaf, Internal]


@dataclass(frozen=True)
class Code:
    """A prefix code: the low ``length`` bits of ``bits``, read highest first."""

    bits: int
    length: int

    def __str__(self) -> str:
        return format_bits(self.bits, self.length, self.length)


def _signed(symbol: int) -> int:
    return symbol - 256 if symbol >= 128 else symbol


def count_symbols(data: bytes) -> list[Leaf]:
    """Count each byte of ``data``, sorted by weight, ties by signed byte value."""
    counts = Counter(data)
    return sorted(
        (Leaf(symbol, weight) for symbol, weight in counts.items()),
        key=lambda leaf: (leaf.weight, _signed(leaf.symbol)),
    )


def build_tree(leaves: list[Leaf]) -> Internal:
    """Build a Huffman tree from leaves already sorted by ascending weight.

    Uses the two-queue method; on equal weights a leaf is taken before a
    merged node.
    """
    pending: deque[Leaf] = deque(leaves)
    if len(pending) < 2:
        raise ValueError("at least two distinct symbols are needed to build a tree")
    merged: deque[Internal] = deque()

    def take() -> Node:
        if not merged or (pending and pending[0].weight <= merged[0].weight):
            return pending.popleft()
        return merged.popleft()

    while pending or len(merged) > 1:
        first = take()
        second = take()
        merged.append(Internal(first, second))
    return merged.popleft()


def code_table(root: Node) -> dict[int, Code]:
    """Map every symbol in the tree to its code: 0 for left, 1 for right."""
    table: dict[int, Code] = {}

    def walk(node: Node, bits: int, length: int) -> None:
        if isinstance(node, Leaf):
            table[node.symbol] = Code(bits, length)
        else:
            walk(node.left, bits << 1, length + 1)
            walk(node.right, (bits << 1) | 1, length + 1)

    walk(root, 0, 0)
    return table


def encoded_tree_bits(root: Node) -> int:
    """Number of bits ``write_tree`` produces for this tree."""
    if isinstance(root, Leaf):
        return 9
    return 1 + encoded_tree_bits(root.left) + encoded_tree_bits(root.right)


def write_tree(writer: BitWriter, node: Node) -> None:
    """Serialise a tree pre-order: 1 and eight symbol bits per leaf, 0 per inner node."""
    if isinstance(node, Leaf):
        writer.write_bits(1, 1)
        writer.write_bits(node.symbol, 8)
    else:
        writer.write_bits(0, 1)
        write_tree(writer, node.left)
        write_tree(writer, node.right)


def read_tree(reader: BitReader) -> Node:
    """Read a tree written by ``write_tree``; leaf weights come back as 0."""

    def read(depth: int) -> Node:
        if reader.read_bit() == 1:
            return Leaf(reader.read_byte())
        if depth >= _MAX_DEPTH:
            raise ValueError("encoded tree is deeper than any byte alphabet allows")
        left = read(depth + 1)
        right = read(depth + 1)
        return Internal(left, right)

    return read(0)


def format_tree(root: Internal) -> str:
    """Render the leaves of a tree, indented by nesting, one per line."""
    lines: list[str] = []

    def leaf_line(side: str, leaf: Leaf, offset: int) -> str:
        return f"{' ' * (offset * 4)}{side} leaf '{chr(leaf.symbol)}' {leaf.weight}"

    def walk(node: Internal, offset: int) -> None:
        if isinstance(node.left, Leaf):
            lines.append(leaf_line("left", node.left, offset))
        else:
            offset += 1
            walk(node.left, offset)
        if isinstance(node.right, Leaf):
            lines.append(leaf_line("right", node.right, offset))
        else:
            offset += 1
            walk(node.right, offset)

    walk(root, 0)
    return "".join(line + "\n" for line in lines)
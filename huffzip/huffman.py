"""Huffman tree construction, code generation and tree (de)serialisation."""

from __future__ import annotations

import heapq
import itertools
from collections import Counter
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Optional

_LEAF_MARKER = ord("1")
_INTERNAL_MARKER = ord("0")


class CorruptTreeError(ValueError):
    """Raised when serialised tree data ends early or is malformed."""

    def __init__(self, message: str = "Corrupt file!") -> None:
        super().__init__(message)


@dataclass(eq=False)
class HuffNode:
    """A node of a Huffman tree.

    Leaves carry a byte value in ``ch``; internal nodes have ``ch`` set to None.
    """

    ch: Optional[int]
    freq: int
    left: Optional[HuffNode] = None
    right: Optional[HuffNode] = None

    def is_leaf(self) -> bool:
        """Return True if this node holds a symbol."""
        return self.ch is not None


def build_frequency_table(data: Iterable[int]) -> Counter:
    """Count how often each byte value occurs in ``data``."""
    return Counter(data)


def build_tree(freq_table: Mapping[int, int]) -> Optional[HuffNode]:
    """Build a Huffman tree from a byte-to-frequency mapping.

    Returns None for an empty table. A table with a single symbol yields an
    internal root whose only child is that symbol's leaf.
    """
    if not freq_table:
        return None

    order = itertools.count()
    heap = [(freq, next(order), HuffNode(ch=ch, freq=freq)) for ch, freq in freq_table.items()]
    heapq.heapify(heap)

    if len(heap) == 1:
        only = heap[0][2]
        return HuffNode(ch=None, freq=only.freq, left=only, right=None)

    while len(heap) > 1:
        _, _, left = heapq.heappop(heap)
        _, _, right = heapq.heappop(heap)
        merged = HuffNode(ch=None, freq=left.freq + right.freq, left=left, right=right)
        heapq.heappush(heap, (merged.freq, next(order), merged))
    return heap[0][2]


def generate_codes(root: Optional[HuffNode]) -> dict[int, str]:
    """Map each symbol in the tree to its code as a string of '0'/'1'."""
    codes: dict[int, str] = {}
    if root is None:
        return codes
    stack: list[tuple[HuffNode, str]] = [(root, "")]
    while stack:
        node, code = stack.pop()
        if node.is_leaf():
            codes[node.ch] = code or "0"
            continue
        if node.right is not None:
            stack.append((node.right, code + "1"))
        if node.left is not None:
            stack.append((node.left, code + "0"))
    return codes


def serialize_tree(root: Optional[HuffNode]) -> bytes:
    """Serialise a tree in pre-order: b'1' + byte for leaves, b'0' for internal nodes."""
    out = bytearray()
    stack: list[Optional[HuffNode]] = [root]
    while stack:
        node = stack.pop()
        if node is None:
            continue
        if node.is_leaf():
            out.append(_LEAF_MARKER)
            out.append(node.ch)
        else:
            out.append(_INTERNAL_MARKER)
            stack.append(node.right)
            stack.append(node.left)
    return bytes(out)


def deserialize_tree(data: bytes, start: int = 0) -> tuple[HuffNode, int]:
    """Rebuild a tree from ``data`` beginning at ``start``.

    Returns the root and the index just past the consumed bytes. Every
    internal node is read with two children; running out of data raises
    CorruptTreeError.
    """
    idx = start
    root: Optional[HuffNode] = None
    pending: list[list] = []  # [internal node, number of children attached]

    while True:
        if idx >= len(data):
            raise CorruptTreeError()
        marker = data[idx]
        idx += 1
        if marker == _LEAF_MARKER:
            if idx >= len(data):
                raise CorruptTreeError()
            node = HuffNode(ch=data[idx], freq=0)
            idx += 1
        else:
            node = HuffNode(ch=None, freq=0)

        if root is None:
            root = node
        else:
            slot = pending[-1]
            if slot[1] == 0:
                slot[0].left = node
                slot[1] = 1
            else:
                slot[0].right = node
                pending.pop()

        if not node.is_leaf():
            pending.append([node, 0])

        if not pending:
            return root, idx
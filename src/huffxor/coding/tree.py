#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Huffman tree construction and code table derivation."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Mapping

from attrs import define, field
from provide.foundation import logger

from huffxor.coding.heap import NodeHeap
from huffxor.config.defaults import ALPHABET_SIZE
from huffxor.exceptions import EmptyInputError

FrequencyTable = dict[int, int]
CodeTable = dict[int, str]


@define(frozen=True)
class Leaf:
    """Tree leaf carrying one byte symbol."""

    symbol: int
    frequency: int


@define(frozen=True)
class Internal:
    """Merge point with the summed frequency of its children.

    ``right`` is only ``None`` for the single-symbol tree, where the sole leaf
    hangs off the left edge so that it receives the one-bit code ``"0"``.
    """

    frequency: int
    left: TreeNode
    right: TreeNode | None = field(default=None)


TreeNode = Leaf | Internal


def count_frequencies(data: bytes) -> FrequencyTable:
    """Count how often each byte value occurs in ``data``."""
    return dict(Counter(data))


class HuffmanTree:
    """Owns the root of a Huffman tree built from a frequency table."""

    def __init__(self, root: TreeNode, frequencies: FrequencyTable) -> None:
        self.root = root
        self.frequencies = frequencies
        self._code_table: CodeTable | None = None

    @classmethod
    def build(cls, frequencies: Mapping[int, int]) -> HuffmanTree:
        """Build a tree by repeatedly merging the two rarest nodes.

        Leaves are seeded in ascending symbol order, so equal frequencies
        resolve the same way on every build.

        Args:
            frequencies: Mapping of byte symbol to occurrence count

        Returns:
            The constructed HuffmanTree

        Raises:
            EmptyInputError: If no symbol has a positive frequency
            ValueError: If a symbol lies outside the byte alphabet
        """
        used = {symbol: count for symbol, count in frequencies.items() if count > 0}
        if not used:
            raise EmptyInputError("No symbols with positive frequency to build a tree from")

        heap = NodeHeap()
        for symbol in sorted(used):
            if not 0 <= symbol < ALPHABET_SIZE:
                raise ValueError(f"Symbol out of byte range: {symbol}")
            heap.push(Leaf(symbol=symbol, frequency=used[symbol]))

        if heap.size() == 1:
            only = heap.pop()
            logger.debug("Single-symbol alphabet, assigning one-bit code", symbol=only.symbol)
            return cls(Internal(frequency=only.frequency, left=only), used)

        while heap.size() > 1:
            left = heap.pop()
            right = heap.pop()
            heap.push(Internal(frequency=left.frequency + right.frequency, left=left, right=right))

        root = heap.pop()
        logger.debug("Built Huffman tree", symbols=len(used), total=root.frequency)
        return cls(root, used)

    @classmethod
    def from_data(cls, data: Iterable[int] | bytes) -> HuffmanTree:
        """Build a tree from the byte frequencies of ``data``."""
        return cls.build(count_frequencies(bytes(data)))

    def code_table(self) -> CodeTable:
        """Walk the tree depth-first, left before right, recording leaf paths.

        Returns:
            Mapping of symbol to its code as a string of ``"0"``/``"1"``
        """
        if self._code_table is not None:
            return dict(self._code_table)

        codes: CodeTable = {}
        stack: list[tuple[TreeNode, str]] = [(self.root, "")]
        while stack:
            node, path = stack.pop()
            if isinstance(node, Leaf):
                codes[node.symbol] = path
                continue
            # Right is pushed first so the left subtree is visited first
            if node.right is not None:
                stack.append((node.right, path + "1"))
            stack.append((node.left, path + "0"))

        self._code_table = codes
        return dict(codes)

    def leaf_count(self) -> int:
        """Return the number of leaves (distinct symbols)."""
        return sum(1 for node in self.iter_nodes() if isinstance(node, Leaf))

    def internal_count(self) -> int:
        """Return the number of internal merge nodes."""
        return sum(1 for node in self.iter_nodes() if isinstance(node, Internal))

    def iter_nodes(self) -> Iterable[TreeNode]:
        """Yield every node in pre-order."""
        stack: list[TreeNode] = [self.root]
        while stack:
            node = stack.pop()
            yield node
            if isinstance(node, Internal):
                if node.right is not None:
                    stack.append(node.right)
                stack.append(node.left)

    def depth(self) -> int:
        """Return the length of the longest code."""
        codes = self.code_table()
        return max((len(code) for code in codes.values()), default=0)


# 🌶️📦🔚

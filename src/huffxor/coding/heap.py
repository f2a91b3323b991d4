#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Min-heap of Huffman tree nodes ordered by frequency.

Ties between equal frequencies are broken by insertion order: the node pushed
first is popped first. This keeps the tree shape reproducible for a given
frequency table, which the archive reader relies on to rebuild the tree.
"""

from __future__ import annotations

import heapq
import itertools
from typing import TYPE_CHECKING

from huffxor.exceptions import EmptyQueueError

if TYPE_CHECKING:
    from huffxor.coding.tree import TreeNode


class NodeHeap:
    """Binary min-heap keyed on ``(frequency, insertion sequence)``."""

    def __init__(self) -> None:
        self._entries: list[tuple[int, int, TreeNode]] = []
        self._sequence = itertools.count()

    def push(self, node: TreeNode) -> None:
        """Insert a node in O(log n)."""
        heapq.heappush(self._entries, (node.frequency, next(self._sequence), node))

    def pop(self) -> TreeNode:
        """Remove and return the minimum-frequency node in O(log n).

        Raises:
            EmptyQueueError: If the heap holds no nodes
        """
        if not self._entries:
            raise EmptyQueueError("Cannot pop from an empty node heap")
        _, _, node = heapq.heappop(self._entries)
        return node

    def size(self) -> int:
        """Return the number of queued nodes."""
        return len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)


# 🌶️📦🔚

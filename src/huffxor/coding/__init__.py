#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Huffman coding primitives: node heap, tree, bit packing and codec."""

from __future__ import annotations

from huffxor.coding.bits import pack_bits, padding_bits, unpack_bits
from huffxor.coding.codec import HuffmanCodec
from huffxor.coding.heap import NodeHeap
from huffxor.coding.tree import (
    CodeTable,
    FrequencyTable,
    HuffmanTree,
    Internal,
    Leaf,
    TreeNode,
    count_frequencies,
)

__all__ = [
    "CodeTable",
    "FrequencyTable",
    "HuffmanCodec",
    "HuffmanTree",
    "Internal",
    "Leaf",
    "NodeHeap",
    "TreeNode",
    "count_frequencies",
    "pack_bits",
    "padding_bits",
    "unpack_bits",
]

# 🌶️📦🔚

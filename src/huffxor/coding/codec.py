#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Huffman codec that keeps its tree resident between compress and decompress."""

from __future__ import annotations

from collections.abc import Mapping

from provide.foundation import logger

from huffxor.coding.bits import pack_bits, unpack_bits
from huffxor.coding.tree import CodeTable, FrequencyTable, HuffmanTree, Leaf, count_frequencies
from huffxor.exceptions import EmptyInputError, MalformedStreamError, TreeNotBuiltError


class HuffmanCodec:
    """Compresses bytes with a Huffman code and decodes with the same tree.

    The packed output carries no header, so a codec instance can only decode
    streams produced with its own resident tree. ``compress`` also records
    the exact bit length of the stream it produced; ``decompress`` uses it to
    ignore the zero padding in the final byte.
    """

    def __init__(self) -> None:
        self.tree: HuffmanTree | None = None
        self.codes: CodeTable | None = None
        self.bit_length: int | None = None

    @classmethod
    def from_frequencies(cls, frequencies: Mapping[int, int]) -> HuffmanCodec:
        """Create a codec whose resident tree is rebuilt from ``frequencies``."""
        codec = cls()
        codec._install(HuffmanTree.build(frequencies))
        return codec

    @property
    def is_built(self) -> bool:
        return self.tree is not None

    @property
    def frequencies(self) -> FrequencyTable:
        if self.tree is None:
            raise TreeNotBuiltError("No Huffman tree is resident in this codec")
        return dict(self.tree.frequencies)

    def _install(self, tree: HuffmanTree) -> None:
        self.tree = tree
        self.codes = tree.code_table()
        self.bit_length = None

    def compress(self, data: bytes) -> bytes:
        """
        Huffman-encode ``data`` and pack the bits into bytes.

        Leaves the tree, code table and bit length resident for decoding.

        Raises:
            EmptyInputError: If ``data`` is empty
        """
        if not data:
            raise EmptyInputError("Cannot compress empty input")

        self._install(HuffmanTree.build(count_frequencies(data)))
        bits = self.encode_bits(data)
        self.bit_length = len(bits)
        packed = pack_bits(bits)

        logger.debug(
            "Compressed data",
            input_size=len(data),
            output_size=len(packed),
            symbols=len(self.codes or {}),
            bit_length=self.bit_length,
        )
        return packed

    def encode_bits(self, data: bytes) -> str:
        """Concatenate the code of every byte in ``data``, in input order."""
        if self.codes is None:
            raise TreeNotBuiltError("No Huffman tree is resident in this codec")
        codes = self.codes
        try:
            return "".join(codes[byte] for byte in data)
        except KeyError as e:
            raise ValueError(f"Byte {e.args[0]} has no code in the resident table") from e

    def decompress(self, packed: bytes, bit_length: int | None = None) -> bytes:
        """
        Unpack ``packed`` and decode it by walking the resident tree.

        Only the most recent tree is resident. A stream packed by an earlier
        ``compress`` call on this codec is not detected as foreign: it either
        fails the bit length or walk checks with MalformedStreamError, or
        decodes to different bytes. Use the archive container when streams
        must outlive the next ``compress``.

        Args:
            packed: Bytes produced by ``compress`` with the same tree
            bit_length: Number of meaningful bits; defaults to the length
                recorded by the last ``compress``. When neither is known the
                whole unpacked stream is walked, padding included.

        Returns:
            The decoded bytes

        Raises:
            TreeNotBuiltError: If no tree is resident
            MalformedStreamError: If the bits do not decode cleanly
        """
        if self.tree is None:
            raise TreeNotBuiltError("No Huffman tree is resident in this codec")

        bits = unpack_bits(packed)
        length = self.bit_length if bit_length is None else bit_length
        if length is None:
            logger.debug("Decoding without a bit length, padding may decode as data")
            return self.decode_bits(bits)

        if length < 0 or length > len(bits):
            raise MalformedStreamError(
                f"Bit length {length} does not fit a payload of {len(bits)} bits"
            )
        if len(bits) - length >= 8:
            raise MalformedStreamError(
                f"Payload holds {len(bits) - length} bits beyond the stated length"
            )

        decoded = self.decode_bits(bits[:length], strict=True)
        logger.debug("Decompressed data", input_size=len(packed), output_size=len(decoded))
        return decoded

    def decode_bits(self, bits: str, strict: bool = False) -> bytes:
        """
        Walk the tree one bit at a time, emitting a symbol at every leaf.

        Args:
            bits: String of ``"0"``/``"1"`` characters
            strict: Raise if the bits end part-way down a code instead of
                dropping the unfinished path

        Raises:
            TreeNotBuiltError: If no tree is resident
            MalformedStreamError: If a bit leads to a missing child, or
                ``strict`` is set and the stream ends mid-code
        """
        if self.tree is None:
            raise TreeNotBuiltError("No Huffman tree is resident in this codec")

        root = self.tree.root
        node = root
        out = bytearray()
        for position, bit in enumerate(bits):
            if isinstance(node, Leaf):
                raise MalformedStreamError(f"Walk passed a leaf at bit {position}")
            if bit == "0":
                child = node.left
            elif bit == "1":
                child = node.right
            else:
                raise MalformedStreamError(f"Invalid bit {bit!r} at position {position}")

            if child is None:
                raise MalformedStreamError(f"Bit {position} leads to a missing child")

            if isinstance(child, Leaf):
                out.append(child.symbol)
                node = root
            else:
                node = child

        if strict and node is not root:
            raise MalformedStreamError("Stream ended in the middle of a code")
        return bytes(out)


# 🌶️📦🔚

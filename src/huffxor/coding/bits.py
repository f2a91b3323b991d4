#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Bit packing between ``"0"``/``"1"`` strings and bytes (MSB first)."""

from __future__ import annotations

_VALID_BITS = frozenset("01")


def padding_bits(bit_count: int) -> int:
    """Return how many zero bits pad ``bit_count`` bits to a byte boundary."""
    return -bit_count % 8


def pack_bits(bits: str) -> bytes:
    """
    Pack a bit string into bytes, most significant bit first.

    The final byte is zero-padded on its low-order end when ``len(bits)`` is
    not a multiple of 8. The pad length is not recorded.

    Args:
        bits: String made of ``"0"`` and ``"1"`` characters

    Returns:
        Packed bytes

    Raises:
        ValueError: If ``bits`` holds any other character
    """
    if not _VALID_BITS.issuperset(bits):
        raise ValueError("Bit string may only contain '0' and '1'")
    if not bits:
        return b""
    padded = bits + "0" * padding_bits(len(bits))
    return int(padded, 2).to_bytes(len(padded) // 8, "big")


def unpack_bits(data: bytes) -> str:
    """
    Expand bytes into a bit string, most significant bit first.

    Always yields ``8 * len(data)`` bits; padding added by ``pack_bits`` is
    not removed.
    """
    return "".join(f"{byte:08b}" for byte in data)


# 🌶️📦🔚

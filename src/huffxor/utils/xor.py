#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Repeating-key XOR transform.

This is obfuscation, not encryption: a repeating key is trivially recovered
from known plaintext.
"""

from __future__ import annotations

from itertools import cycle

from huffxor.config.defaults import DEFAULT_XOR_KEY
from huffxor.exceptions import EmptyKeyError


def _as_key(key: bytes | str) -> bytes:
    if isinstance(key, str):
        key = key.encode("utf-8")
    if not key:
        raise EmptyKeyError("XOR key must contain at least one byte")
    return key


def xor_apply(data: bytes, key: bytes | str) -> bytes:
    """
    XOR every byte of ``data`` with ``key[i % len(key)]``.

    Applying the same key twice restores the input.

    Args:
        data: Bytes to transform
        key: Key bytes, or text encoded as UTF-8

    Returns:
        Transformed bytes of the same length as ``data``

    Raises:
        EmptyKeyError: If the key is empty
    """
    key_bytes = _as_key(key)
    return bytes(byte ^ k for byte, k in zip(data, cycle(key_bytes)))


def xor_encode(data: bytes, key: bytes | str = DEFAULT_XOR_KEY) -> bytes:
    """XOR encode data with repeating key (defaults to π digits)."""
    return xor_apply(data, key)


def xor_decode(data: bytes, key: bytes | str = DEFAULT_XOR_KEY) -> bytes:
    """
    XOR decode data with repeating key.

    Since XOR is symmetric, this is the same as encoding.
    """
    return xor_apply(data, key)  # XOR is its own inverse


class XorCipher:
    """Holds a validated key and applies it to byte strings."""

    def __init__(self, key: bytes | str = DEFAULT_XOR_KEY) -> None:
        self.key = _as_key(key)

    def apply(self, data: bytes) -> bytes:
        return xor_apply(data, self.key)


# 🌶️📦🔚

#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Utility helpers for huffxor."""

from __future__ import annotations

from huffxor.utils.io import read_all_bytes, read_all_text, write_all_bytes
from huffxor.utils.xor import (
    XorCipher,
    xor_apply,
    xor_decode,
    xor_encode,
)

__all__ = [
    # File I/O
    "read_all_bytes",
    "read_all_text",
    "write_all_bytes",
    # XOR utilities
    "XorCipher",
    "xor_apply",
    "xor_decode",
    "xor_encode",
]

# 🌶️📦🔚

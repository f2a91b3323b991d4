#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Centralized default values for huffxor configuration."""

from __future__ import annotations

# =================================
# XOR defaults
# =================================
DEFAULT_XOR_KEY = bytes([3, 1, 4, 1, 5, 9, 2, 6])  # First 8 digits of π

# =================================
# Archive container
# =================================
ARCHIVE_MAGIC = b"HXF1"
ARCHIVE_VERSION = 1
ARCHIVE_HEADER_FORMAT = "<4sBBHQQI"  # magic, version, flags, symbol_count, original_len, bit_length, crc32
ARCHIVE_ENTRY_FORMAT = "<BQ"  # symbol, frequency

FLAG_XOR = 1 << 0  # Payload is XOR-obfuscated

# =================================
# Alphabet
# =================================
ALPHABET_SIZE = 256

# =================================
# File suffixes
# =================================
ARCHIVE_SUFFIX = ".hxf"
RAW_SUFFIX = ".huf"
XOR_SUFFIX = ".xor"

# =================================
# Logging
# =================================
DEFAULT_LOG_LEVEL = "WARNING"

# 🌶️📦🔚

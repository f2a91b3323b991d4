#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Custom exceptions for huffxor."""

from __future__ import annotations

from provide.foundation.errors import FoundationError


class HuffXorError(FoundationError):
    """Base exception for all huffxor errors."""

    pass


class EmptyInputError(HuffXorError):
    """Raised when there are no symbols to encode."""

    pass


class EmptyKeyError(HuffXorError):
    """Raised when a zero-length XOR key is supplied."""

    pass


class EmptyQueueError(HuffXorError):
    """Raised when popping from an empty node heap."""

    pass


class TreeNotBuiltError(HuffXorError):
    """Raised when decoding is attempted without a resident Huffman tree."""

    pass


class MalformedStreamError(HuffXorError):
    """Raised when an encoded bitstream does not match the Huffman tree."""

    pass


class ArchiveFormatError(HuffXorError):
    """Raised for invalid or truncated archive containers."""

    pass


class StorageError(HuffXorError):
    """Raised when reading or writing a file fails."""

    pass


# 🌶️📦🔚

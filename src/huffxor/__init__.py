#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""huffxor core package exports."""

from __future__ import annotations

from provide.foundation.utils import get_version

from huffxor.api import compress_file, decompress_file, inspect_archive, run_pipeline, xor_file
from huffxor.coding import HuffmanCodec, HuffmanTree, pack_bits, unpack_bits
from huffxor.container import pack_archive, unpack_archive
from huffxor.exceptions import (
    ArchiveFormatError,
    EmptyInputError,
    EmptyKeyError,
    HuffXorError,
    MalformedStreamError,
    StorageError,
    TreeNotBuiltError,
)
from huffxor.utils.xor import XorCipher, xor_apply

__version__ = get_version("huffxor", caller_file=__file__)

__all__ = [
    "ArchiveFormatError",
    "EmptyInputError",
    "EmptyKeyError",
    "HuffXorError",
    "HuffmanCodec",
    "HuffmanTree",
    "MalformedStreamError",
    "StorageError",
    "TreeNotBuiltError",
    "XorCipher",
    "__version__",
    "compress_file",
    "decompress_file",
    "inspect_archive",
    "pack_archive",
    "pack_bits",
    "run_pipeline",
    "unpack_archive",
    "unpack_bits",
    "xor_apply",
    "xor_file",
]

# 🌶️📦🔚

#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Command modules for the huffxor CLI."""

from __future__ import annotations

from huffxor.commands.compress import compress_command
from huffxor.commands.decompress import decompress_command
from huffxor.commands.inspect import inspect_command
from huffxor.commands.pipeline import pipeline_command
from huffxor.commands.xor import xor_command

__all__ = [
    "compress_command",
    "decompress_command",
    "inspect_command",
    "pipeline_command",
    "xor_command",
]

# 🌶️📦🔚

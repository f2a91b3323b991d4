#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""huffxor configuration built on the Provide Foundation config stack."""

from __future__ import annotations

from huffxor.config.runtime import HuffXorRuntimeConfig, parse_log_level

__all__ = [
    "HuffXorRuntimeConfig",
    "parse_log_level",
]

# 🌶️📦🔚

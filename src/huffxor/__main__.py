#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Allow running huffxor as ``python -m huffxor``."""

from __future__ import annotations

from huffxor.cli import cli

if __name__ == "__main__":
    cli()

# 🌶️📦🔚

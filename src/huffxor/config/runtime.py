#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""huffxor runtime configuration for CLI startup."""

from __future__ import annotations

from attrs import define
from provide.foundation.config.base import field
from provide.foundation.config.env import RuntimeConfig

from huffxor.config.defaults import DEFAULT_LOG_LEVEL, DEFAULT_XOR_KEY

VALID_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def parse_log_level(value: str) -> str:
    """Validate and normalize log levels."""
    normalized = value.strip().upper()
    if normalized not in VALID_LOG_LEVELS:
        raise ValueError(f"Invalid log level: {value}")
    return normalized


@define
class HuffXorRuntimeConfig(RuntimeConfig):
    """huffxor runtime configuration for CLI startup."""

    log_level: str = field(
        default=DEFAULT_LOG_LEVEL,
        env_var="HUFFXOR_LOG_LEVEL",
        converter=parse_log_level,
        metadata={"help": "Log level for huffxor operations (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL)"},
    )

    setup_log_level: str = field(
        default=DEFAULT_LOG_LEVEL,
        env_var="HUFFXOR_SETUP_LOG_LEVEL",
        converter=parse_log_level,
        metadata={"help": "Log level for Foundation setup messages during initialization"},
    )

    xor_key: str = field(
        default="",
        env_var="HUFFXOR_XOR_KEY",
        metadata={"help": "Default XOR key used when a command is given none"},
    )

    def resolve_xor_key(self, override: str | None = None) -> bytes:
        """Return the XOR key bytes, preferring an explicit override."""
        if override is not None:
            return override.encode("utf-8")
        if self.xor_key:
            return self.xor_key.encode("utf-8")
        return DEFAULT_XOR_KEY


# 🌶️📦🔚

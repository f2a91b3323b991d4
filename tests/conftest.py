#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shared pytest fixtures and helpers for huffxor tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import provide.testkit  # noqa: F401 - Installs setproctitle blocker early
from provide.testkit.logger import reset_foundation_setup_for_testing
import pytest

SAMPLE_TEXT = (
    b"It was the best of times, it was the worst of times, it was the age of wisdom, "
    b"it was the age of foolishness, it was the epoch of belief, it was the epoch of incredulity.\n"
)


@pytest.fixture(autouse=True)
def reset_foundation_logging() -> Iterator[None]:
    """Reset foundation logging state before each test to avoid conflicts."""
    reset_foundation_setup_for_testing()
    yield
    # Reset again after test to ensure clean state
    reset_foundation_setup_for_testing()


@pytest.fixture
def sample_bytes() -> bytes:
    """English text with a skewed byte distribution."""
    return SAMPLE_TEXT * 20


@pytest.fixture
def sample_file(tmp_path: Path, sample_bytes: bytes) -> Path:
    """Write the sample bytes to a temporary file."""
    path = tmp_path / "input.txt"
    path.write_bytes(sample_bytes)
    return path


# 🌶️📦🔚

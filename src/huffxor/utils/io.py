#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Whole-file read and write helpers that surface failures as StorageError."""

from __future__ import annotations

from pathlib import Path

from provide.foundation import logger
from provide.foundation.file import atomic_write
from provide.foundation.file.directory import ensure_parent_dir

from huffxor.exceptions import StorageError


def read_all_bytes(path: Path | str) -> bytes:
    """Read the entire file at ``path`` as bytes."""
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        logger.error("Failed to read file", path=str(path), error=str(e))
        raise StorageError(f"Failed to read {path}: {e}") from e
    logger.debug("Read file", path=str(path), size=len(data))
    return data


def read_all_text(path: Path | str, encoding: str = "utf-8") -> str:
    """Read the entire file at ``path`` as text."""
    path = Path(path)
    try:
        return path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Failed to read text file", path=str(path), error=str(e))
        raise StorageError(f"Failed to read {path}: {e}") from e


def write_all_bytes(path: Path | str, data: bytes) -> None:
    """Atomically replace the file at ``path`` with ``data``."""
    path = Path(path)
    try:
        ensure_parent_dir(path)
        atomic_write(path, data)
    except OSError as e:
        logger.error("Failed to write file", path=str(path), error=str(e))
        raise StorageError(f"Failed to write {path}: {e}") from e
    logger.debug("Wrote file", path=str(path), size=len(data))


# 🌶️📦🔚

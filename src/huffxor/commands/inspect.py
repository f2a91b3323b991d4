#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Inspect command for the huffxor CLI."""

from __future__ import annotations

import json
from pathlib import Path

import click
from provide.foundation.console import perr, pout
from provide.foundation.formatting import format_size

from huffxor.api import inspect_archive
from huffxor.console import get_command_logger
from huffxor.exceptions import HuffXorError

# Get structured logger for this command
log = get_command_logger("inspect")


@click.command("inspect")
@click.argument(
    "archive_file",
    type=click.Path(exists=True, dir_okay=False, resolve_path=True),
    required=True,
)
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def inspect_command(archive_file: str, output_json: bool) -> None:
    """Show the header of a huffxor ARCHIVE_FILE."""
    log.debug("Inspecting archive", archive=archive_file)

    try:
        info = inspect_archive(Path(archive_file))
    except HuffXorError as e:
        log.error("Inspect failed", error=str(e), archive=archive_file)
        perr(f"❌ Inspect failed: {e}")
        raise click.Abort() from e

    if output_json:
        pout(json.dumps(info, indent=2))
        return

    pout(f"Archive: {Path(archive_file).name}")
    pout(f"  Version:         {info['version']}")
    pout(f"  Symbols:         {info['symbol_count']}")
    pout(f"  Original size:   {format_size(info['original_length'])}")
    pout(f"  Payload size:    {format_size(info['payload_size'])} ({info['bit_length']} bits)")
    pout(f"  Ratio:           {info['ratio']:.1%}")
    pout(f"  XOR obfuscated:  {'yes' if info['xored'] else 'no'}")


# 🌶️📦🔚

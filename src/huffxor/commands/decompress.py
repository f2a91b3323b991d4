#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Decompress command for the huffxor CLI."""

from __future__ import annotations

from pathlib import Path

import click
from provide.foundation.console import perr, pout
from provide.foundation.formatting import format_size

from huffxor.api import decompress_file
from huffxor.console import get_command_logger
from huffxor.exceptions import HuffXorError

# Get structured logger for this command
log = get_command_logger("decompress")


@click.command("decompress")
@click.argument(
    "archive_file",
    type=click.Path(exists=True, dir_okay=False, resolve_path=True),
    required=True,
)
@click.argument(
    "output_file",
    type=click.Path(dir_okay=False, resolve_path=True),
    required=True,
)
@click.option(
    "--xor-key",
    default=None,
    help="Key for an XOR-obfuscated archive (defaults to the configured key)",
)
@click.option(
    "--force",
    "-f",
    is_flag=True,
    help="Overwrite existing output file",
)
@click.pass_context
def decompress_command(
    ctx: click.Context,
    archive_file: str,
    output_file: str,
    xor_key: str | None,
    force: bool,
) -> None:
    """Restore OUTPUT_FILE from a huffxor ARCHIVE_FILE.

    Headerless streams written with `compress --raw` cannot be decoded here;
    use the `pipeline` command to decode them within the same run.
    """
    output = Path(output_file)
    log.debug("Decompress command started", archive=archive_file, output=output_file)

    if output.exists() and not force:
        log.error("Output file already exists", output=str(output))
        perr(f"❌ Output file already exists: {output}")
        perr("Use --force to overwrite")
        raise click.Abort()

    key = ctx.obj["config"].resolve_xor_key(xor_key)

    try:
        stats = decompress_file(Path(archive_file), output, xor_key=key)
    except HuffXorError as e:
        log.error("Decompression failed", error=str(e), archive=archive_file)
        perr(f"❌ Decompression failed: {e}")
        raise click.Abort() from e

    pout(f"✅ Decompressed {format_size(stats['output_size'])}: {output}")


# 🌶️📦🔚

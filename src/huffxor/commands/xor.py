#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""XOR command for the huffxor CLI."""

from __future__ import annotations

from pathlib import Path

import click
from provide.foundation.console import perr, pout

from huffxor.api import xor_file
from huffxor.config.defaults import XOR_SUFFIX
from huffxor.console import get_command_logger
from huffxor.exceptions import HuffXorError

# Get structured logger for this command
log = get_command_logger("xor")


@click.command("xor")
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, resolve_path=True),
    required=True,
)
@click.argument(
    "output_file",
    type=click.Path(dir_okay=False, resolve_path=True),
    required=False,
)
@click.option(
    "--key",
    "-k",
    default=None,
    help="XOR key (defaults to HUFFXOR_XOR_KEY or the built-in key)",
)
@click.option(
    "--force",
    "-f",
    is_flag=True,
    help="Overwrite existing output file",
)
@click.pass_context
def xor_command(
    ctx: click.Context,
    input_file: str,
    output_file: str | None,
    key: str | None,
    force: bool,
) -> None:
    """XOR INPUT_FILE with a repeating key into OUTPUT_FILE.

    Running it again with the same key restores the input. This is
    obfuscation only and offers no real confidentiality. OUTPUT_FILE
    defaults to INPUT_FILE with a .xor suffix appended.
    """
    input_path = Path(input_file)
    output = Path(output_file) if output_file else input_path.with_name(input_path.name + XOR_SUFFIX)
    log.debug("XOR command started", input=input_file, output=str(output))

    if output.exists() and not force:
        log.error("Output file already exists", output=str(output))
        perr(f"❌ Output file already exists: {output}")
        perr("Use --force to overwrite")
        raise click.Abort()

    try:
        key_bytes = ctx.obj["config"].resolve_xor_key(key)
        size = xor_file(input_path, output, key_bytes)
    except HuffXorError as e:
        log.error("XOR failed", error=str(e), input=input_file)
        perr(f"❌ XOR failed: {e}")
        raise click.Abort() from e

    pout(f"✅ XOR operation completed ({size} bytes). Output written to: {output}")


# 🌶️📦🔚

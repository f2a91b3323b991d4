#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Compress command for the huffxor CLI."""

from __future__ import annotations

from pathlib import Path

import click
from provide.foundation.console import perr, pout
from provide.foundation.formatting import format_size

from huffxor.api import compress_file
from huffxor.config.defaults import ARCHIVE_SUFFIX, RAW_SUFFIX
from huffxor.console import get_command_logger
from huffxor.exceptions import HuffXorError

# Get structured logger for this command
log = get_command_logger("compress")


def _default_output(input_path: Path, raw: bool) -> Path:
    """Append the archive or raw-stream suffix to the input path."""
    suffix = RAW_SUFFIX if raw else ARCHIVE_SUFFIX
    return input_path.with_name(input_path.name + suffix)


@click.command("compress")
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
    "--raw",
    is_flag=True,
    help="Write the headerless packed stream (not decodable by a later run)",
)
@click.option(
    "--xor",
    "use_xor",
    is_flag=True,
    help="XOR the compressed bytes with the configured key",
)
@click.option(
    "--xor-key",
    default=None,
    help="XOR the compressed bytes with this key (implies --xor)",
)
@click.option(
    "--force",
    "-f",
    is_flag=True,
    help="Overwrite existing output file",
)
@click.pass_context
def compress_command(
    ctx: click.Context,
    input_file: str,
    output_file: str | None,
    raw: bool,
    use_xor: bool,
    xor_key: str | None,
    force: bool,
) -> None:
    """Huffman-compress INPUT_FILE into OUTPUT_FILE.

    OUTPUT_FILE defaults to INPUT_FILE with a .hxf suffix appended (.huf with --raw).
    """
    output = Path(output_file) if output_file else _default_output(Path(input_file), raw)
    log.debug(
        "Compress command started",
        input=input_file,
        output=str(output),
        raw=raw,
        xor=use_xor or xor_key is not None,
    )

    if output.exists() and not force:
        log.error("Output file already exists", output=str(output))
        perr(f"❌ Output file already exists: {output}")
        perr("Use --force to overwrite")
        raise click.Abort()

    key = None
    if use_xor or xor_key is not None:
        key = ctx.obj["config"].resolve_xor_key(xor_key)

    try:
        stats = compress_file(Path(input_file), output, raw=raw, xor_key=key)
    except HuffXorError as e:
        log.error("Compression failed", error=str(e), input=input_file)
        perr(f"❌ Compression failed: {e}")
        raise click.Abort() from e

    pout(
        f"✅ Compressed {format_size(stats['input_size'])} → "
        f"{format_size(stats['output_size'])} ({stats['ratio']:.1%}): {output}"
    )


# 🌶️📦🔚

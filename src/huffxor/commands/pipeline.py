#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""End-to-end pipeline command for the huffxor CLI."""

from __future__ import annotations

from pathlib import Path

import click
from provide.foundation.console import perr, pout

from huffxor.api import run_pipeline
from huffxor.console import get_command_logger
from huffxor.exceptions import HuffXorError

# Get structured logger for this command
log = get_command_logger("pipeline")

_OUT_PATH = click.Path(dir_okay=False, resolve_path=True)


@click.command("pipeline")
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, resolve_path=True),
    required=True,
)
@click.option("--compressed", required=True, type=_OUT_PATH, help="Path for the compressed file")
@click.option("--decompressed", required=True, type=_OUT_PATH, help="Path for the decompressed file")
@click.option("--encrypted", required=True, type=_OUT_PATH, help="Path for the XOR-encrypted file")
@click.option("--decrypted", required=True, type=_OUT_PATH, help="Path for the XOR-decrypted file")
@click.option("--key", "-k", default=None, help="XOR key (defaults to the configured key)")
@click.option("--text", is_flag=True, help="Read INPUT_FILE as UTF-8 text")
@click.option("--force", "-f", is_flag=True, help="Overwrite existing output files")
@click.pass_context
def pipeline_command(
    ctx: click.Context,
    input_file: str,
    compressed: str,
    decompressed: str,
    encrypted: str,
    decrypted: str,
    key: str | None,
    text: bool,
    force: bool,
) -> None:
    """Compress, decompress, XOR-encrypt and XOR-decrypt INPUT_FILE in one run.

    The compressed file has no header; it is decoded with the Huffman tree
    kept in memory from the compress step.
    """
    log.debug("Pipeline command started", input=input_file, text=text)

    outputs = [Path(p) for p in (compressed, decompressed, encrypted, decrypted)]
    existing = [p for p in outputs if p.exists()]
    if existing and not force:
        log.error("Output files already exist", outputs=[str(p) for p in existing])
        for path in existing:
            perr(f"❌ Output file already exists: {path}")
        perr("Use --force to overwrite")
        raise click.Abort()

    try:
        key_bytes = ctx.obj["config"].resolve_xor_key(key)
        result = run_pipeline(
            Path(input_file),
            *outputs,
            key_bytes,
            text=text,
        )
    except HuffXorError as e:
        log.error("Pipeline failed", error=str(e), input=input_file)
        perr(f"❌ Pipeline failed: {e}")
        raise click.Abort() from e

    pout(f"Compression done. Output written to: {compressed}")
    pout(f"Decompression done. Output written to: {decompressed}")
    pout(f"XOR operation completed. Output written to: {encrypted}")
    pout(f"XOR operation completed. Output written to: {decrypted}")

    if not result["roundtrip_ok"]:
        log.warning("Decompressed output differs from input", input=input_file)
        perr("⚠️  Decompressed output differs from the input")
        raise click.Abort()

    log.info("Pipeline completed", **result)


# 🌶️📦🔚

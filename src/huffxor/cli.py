#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""huffxor command-line interface entrypoint."""

from __future__ import annotations

from attrs import evolve
import click
from provide.foundation import CLIContext, TelemetryConfig, get_hub
from provide.foundation.utils import get_version

# Import all commands at module level
from huffxor.commands.compress import compress_command
from huffxor.commands.decompress import decompress_command
from huffxor.commands.inspect import inspect_command
from huffxor.commands.pipeline import pipeline_command
from huffxor.commands.xor import xor_command
from huffxor.config import HuffXorRuntimeConfig

__version__ = get_version("huffxor", caller_file=__file__)


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.version_option(
    __version__,
    "-V",
    "--version",
    prog_name="huffxor",
    message="%(prog)s version %(version)s",
)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Huffman compression with optional repeating-key XOR obfuscation.

    Configure via environment variables:
    - HUFFXOR_LOG_LEVEL: Set log level (trace, debug, info, warning, error)
    - HUFFXOR_SETUP_LOG_LEVEL: Control Foundation's initialization logs
    - HUFFXOR_XOR_KEY: Default key for XOR operations
    - PROVIDE_LOG_FILE: Write logs to file
    """
    ctx.ensure_object(dict)

    # Load huffxor configuration from environment
    config = HuffXorRuntimeConfig.from_env()

    cli_ctx = CLIContext.from_env()
    base_telemetry = TelemetryConfig.from_env()

    # Merge with huffxor-specific settings
    telemetry_config = evolve(
        base_telemetry,
        service_name="huffxor",
        logging=evolve(
            base_telemetry.logging,
            default_level=config.log_level,  # type: ignore[arg-type]
        ),
    )

    hub = get_hub()
    hub.initialize_foundation(telemetry_config)

    ctx.obj["config"] = config
    ctx.obj["cli_context"] = cli_ctx
    ctx.obj["log"] = cli_ctx.logger


cli.add_command(compress_command, name="compress")
cli.add_command(decompress_command, name="decompress")
cli.add_command(xor_command, name="xor")
cli.add_command(pipeline_command, name="pipeline")
cli.add_command(inspect_command, name="inspect")

main = cli

if __name__ == "__main__":
    cli()

# 🌶️📦🔚

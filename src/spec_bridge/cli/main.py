"""
Main CLI entry point for spec-bridge.

This module provides the command-line interface for comparing an old and
a new API specification and inferring the field mappings between them.
"""

import sys
from pathlib import Path

import click
from dotenv import load_dotenv

from spec_bridge import __version__
from spec_bridge.cli.commands import compare as compare_commands
from spec_bridge.cli.commands import config as config_commands
from spec_bridge.cli.context import BridgeContext
from spec_bridge.cli.decorators import handle_errors
from spec_bridge.utils.logging import configure_logging, get_logger

# Load environment variables from .env file
load_dotenv()

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="spec-bridge")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file",
    envvar="SPEC_BRIDGE_CONFIG_FILE",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Set console logging level (default: from configuration, ERROR without one)",
    envvar="SPEC_BRIDGE_LOG_LEVEL",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Also write logs to this file",
    envvar="SPEC_BRIDGE_LOG_FILE",
)
@click.pass_context
@handle_errors
def cli(
    ctx: click.Context,
    config: Path | None,
    log_level: str | None,
    log_file: Path | None,
) -> None:
    """spec-bridge - Compare API specifications and plan migrations.

    Diffs an old and a new OpenAPI document, classifies every change by its
    impact on existing clients, and infers which old fields correspond to
    which new ones.

    Examples:

        # Compare two specifications
        spec-bridge compare old.yaml new.yaml

        # Infer field mappings
        spec-bridge mappings old.yaml new.yaml

        # Look up a known Converge to Elavon mapping
        spec-bridge lookup sale
    """
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)

    configure_logging(level=log_level or "ERROR", log_file=str(log_file) if log_file else None)

    bridge_ctx = BridgeContext(
        config_path=config,
        log_level=log_level or "ERROR",
        log_file=log_file,
    )
    ctx.obj = bridge_ctx

    # Command-line options take precedence over the logging section of the file
    if config is not None:
        logging_config = bridge_ctx.config.logging
        configure_logging(
            level=log_level or logging_config.level,
            log_format=logging_config.format,
            log_file=str(log_file) if log_file else logging_config.file,
            file_level=logging_config.file_level,
        )

    logger.debug(
        "cli_initialized",
        config=str(config) if config else None,
        log_level=log_level,
    )


cli.add_command(config_commands.config)
cli.add_command(compare_commands.compare)
cli.add_command(compare_commands.mappings)
cli.add_command(compare_commands.lookup)


def main() -> int:
    """Main entry point for CLI."""
    try:
        result = cli(standalone_mode=False)
        return result if isinstance(result, int) else 0
    except click.ClickException as e:
        e.show()
        return e.exit_code
    except click.exceptions.Abort:
        click.echo("Aborted!", err=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())

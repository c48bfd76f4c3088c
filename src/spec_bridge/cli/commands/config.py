"""Configuration management commands."""

from pathlib import Path

import click

from spec_bridge.cli.context import BridgeContext
from spec_bridge.cli.decorators import handle_errors, pass_context
from spec_bridge.cli.utils import echo_info, echo_success, print_table
from spec_bridge.config import BridgeConfig, save_config_to_yaml


@click.group(name="config")
def config() -> None:
    """Configuration management commands."""


@config.command(name="show")
@pass_context
@handle_errors
def show(ctx: BridgeContext) -> None:
    """Show the effective configuration.

    Values come from the --config file when given, otherwise from
    SPEC_BRIDGE_* environment variables and defaults.
    """
    if ctx.config_path is not None:
        echo_info(f"Configuration file: {ctx.config_path}")

    rows = []
    for section, values in ctx.config.model_dump().items():
        for key, value in values.items():
            rows.append([f"{section}.{key}", value])

    print_table("Configuration", ["Setting", "Value"], rows)


@config.command(name="init")
@click.argument("output", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--force", is_flag=True, help="Overwrite an existing file")
@handle_errors
def init(output: Path, force: bool) -> None:
    """Write a configuration file with the default settings."""
    if output.exists() and not force:
        raise click.UsageError(f"{output} already exists. Use --force to overwrite.")

    save_config_to_yaml(BridgeConfig(), output)
    echo_success(f"Default configuration written to {output}")

"""
Decorators for CLI commands.

This module provides decorators for error handling and context passing.
"""

import functools
from collections.abc import Callable

import click

from spec_bridge.cli.context import BridgeContext
from spec_bridge.exceptions import (
    ConfigurationError,
    ExportError,
    MalformedSpecError,
    SpecLoadError,
)
from spec_bridge.utils.logging import get_logger, log_error

logger = get_logger(__name__)


def pass_context(f: Callable) -> Callable:
    """
    Decorator to pass BridgeContext to command function.

    Usage:
        @click.command()
        @pass_context
        def my_command(ctx: BridgeContext):
            print(ctx.config)
    """

    @click.pass_context
    @functools.wraps(f)
    def wrapper(click_ctx: click.Context, *args, **kwargs):
        bridge_ctx: BridgeContext = click_ctx.obj
        return f(bridge_ctx, *args, **kwargs)

    return wrapper


def handle_errors(f: Callable) -> Callable:
    """
    Decorator to handle common errors in CLI commands.

    Exit codes:
        0: Success
        1: Unexpected error
        2: Configuration error
        3: Specification could not be loaded or is malformed
        4: Export error
    """

    @functools.wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)

        except (click.exceptions.Exit, click.ClickException):
            raise

        except ConfigurationError as e:
            logger.error("configuration_error", error=str(e))
            click.echo(f"Configuration Error: {e}", err=True)
            click.echo("\nPlease check your configuration file.", err=True)
            raise click.exceptions.Exit(2) from e

        except (SpecLoadError, MalformedSpecError) as e:
            logger.error("specification_error", error=str(e))
            click.echo(f"Specification Error: {e}", err=True)
            raise click.exceptions.Exit(3) from e

        except ExportError as e:
            logger.error("export_error", error=str(e))
            click.echo(f"Export Error: {e}", err=True)
            raise click.exceptions.Exit(4) from e

        except Exception as e:
            log_error(logger, e, f.__name__)
            click.echo(f"Unexpected Error: {e}", err=True)
            click.echo(
                "\nAn unexpected error occurred. Please check the logs for details.",
                err=True,
            )
            raise click.exceptions.Exit(1) from e

    return wrapper

#!/usr/bin/env python3
"""
Main CLI Entry Point for centwise

Provides a unified command-line interface for money arithmetic and formatting.
"""

import logging
import os

import click

from ..core.config import get_config


@click.group()
@click.option(
    "--config-env",
    type=click.Choice(["development", "test", "production"]),
    help="Override environment configuration",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_env: str | None, verbose: bool, debug: bool) -> None:
    """
    centwise - Fixed-Point Money Arithmetic

    Parse, add, split and format monetary amounts without floating-point errors.
    """
    # Ensure context object exists
    ctx.ensure_object(dict)

    # Set environment if specified
    if config_env:
        os.environ["CENTWISE_ENV"] = config_env

    # Configure debug logging if requested
    if debug:
        os.environ["LOG_LEVEL"] = "DEBUG"
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("centwise").setLevel(logging.DEBUG)

    try:
        config_obj = get_config()
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    # Store global options
    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    ctx.obj["config"] = config_obj

    if verbose:
        click.echo(f"Environment: {config_obj.environment.value}")

    if debug:
        click.echo("Debug logging enabled")


@main.command()
@click.pass_context
def version(ctx: click.Context) -> None:
    """Show version information."""
    from centwise import __author__, __version__

    click.echo(f"centwise v{__version__}")
    click.echo(f"Author: {__author__}")


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show current configuration."""
    config_obj = ctx.obj["config"]
    display = config_obj.display

    click.echo("Current Configuration:")
    click.echo(f"  Environment: {config_obj.environment.value}")
    click.echo(f"  Symbol: {display.symbol}")
    click.echo(f"  Separator: {display.separator}")
    click.echo(f"  Decimal Mark: {display.decimal}")
    click.echo(f"  Precision: {display.precision}")
    click.echo(f"  Vedic Grouping: {display.use_vedic}")
    click.echo(f"  Pattern: {display.pattern}")
    click.echo(f"  Negative Pattern: {display.negative_pattern}")
    click.echo(f"  Debug Mode: {config_obj.debug}")
    click.echo(f"  Log Level: {config_obj.log_level}")


# Import money commands
from .money import add, distribute, divide, format_amount, multiply, subtract  # noqa: E402

for command in (format_amount, add, subtract, multiply, divide, distribute):
    main.add_command(command)


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
Money CLI - Arithmetic and Formatting Commands

Command-line access to Money parsing, arithmetic, distribution and formatting.
Amounts are parsed leniently ("$1,234.56", "(1.99)", "-5"); display options
default to the environment configuration.
"""

import logging
import re
from collections.abc import Callable
from functools import reduce
from typing import Any

import click

from ..core.config import get_config
from ..core.json_utils import format_json
from ..core.money import Money
from ..core.settings import MoneySettings

logger = logging.getLogger(__name__)

# Allow negative amounts like "-5.00" as arguments
AMOUNT_COMMAND = {"ignore_unknown_options": True}

# Tokens that look like options rather than amounts: "--symbl", "-x"
_OPTION_LIKE = re.compile(r"--|-[A-Za-z]")


def reject_unknown_options(ctx: click.Context, param: click.Parameter, value: Any) -> Any:
    """Fail on unknown options that the option parser passed through as amounts."""
    if value is None or ctx.resilient_parsing:
        return value
    for token in value if isinstance(value, tuple) else (value,):
        if _OPTION_LIKE.match(token):
            raise click.NoSuchOption(token.split("=", 1)[0], ctx=ctx)
    return value


def display_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the shared parsing and display options to a command."""
    options = [
        click.option("--symbol", help="Currency symbol (default: $)"),
        click.option("--separator", help="Digit group separator (default: ,)"),
        click.option("--decimal", help="Decimal mark for input and output (default: .)"),
        click.option("--precision", type=click.IntRange(min=0), help="Fractional digits (default: 2)"),
        click.option("--increment", type=float, help="Round displayed amounts to this step, e.g. 0.05"),
        click.option("--vedic/--no-vedic", "use_vedic", default=None, help="South-Asian digit grouping"),
        click.option("--pattern", help="Pattern for non-negative amounts (default: !#)"),
        click.option("--negative-pattern", help="Pattern for negative amounts (default: -!#)"),
        click.option("--from-cents", is_flag=True, help="Read numeric amounts as minor units"),
        click.option("--strict", is_flag=True, help="Fail on unsupported input instead of using 0"),
        click.option("--raw", is_flag=True, help="Print the plain amount instead of the formatted one"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def build_settings(options: dict[str, Any]) -> MoneySettings:
    """
    Merge command-line display options over the environment configuration.

    Args:
        options: Command keyword arguments (display options only are used)

    Returns:
        MoneySettings for the command
    """
    try:
        settings = get_config().to_settings(
            symbol=options.get("symbol"),
            separator=options.get("separator"),
            decimal=options.get("decimal"),
            precision=options.get("precision"),
            increment=options.get("increment"),
            use_vedic=options.get("use_vedic"),
            pattern=options.get("pattern"),
            negative_pattern=options.get("negative_pattern"),
            from_cents=options.get("from_cents") or None,
            error_on_invalid=options.get("strict") or None,
        )
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    logger.debug("Money settings: %s", settings)
    return settings


def render(money: Money, raw: bool) -> str:
    """Render a result as the canonical string (raw) or formatted display."""
    return money.to_string() if raw else money.format()


def _run(operation: Callable[[], Money | list[Money]]) -> Money | list[Money]:
    try:
        return operation()
    except ZeroDivisionError as e:
        raise click.ClickException("Cannot divide by zero") from e
    except (OverflowError, ValueError) as e:
        raise click.ClickException(str(e)) from e


@click.command(name="format", context_settings=AMOUNT_COMMAND)
@click.argument("amount", callback=reject_unknown_options)
@display_options
def format_amount(amount: str, **options: Any) -> None:
    """
    Parse AMOUNT and print it formatted.

    Example:
      centwise format 1234567 --vedic
    """
    settings = build_settings(options)
    money = _run(lambda: Money(amount, settings))
    click.echo(render(money, options["raw"]))


@click.command(context_settings=AMOUNT_COMMAND)
@click.argument("amount", callback=reject_unknown_options)
@click.argument("others", nargs=-1, required=True, callback=reject_unknown_options)
@display_options
def add(amount: str, others: tuple[str, ...], **options: Any) -> None:
    """
    Add OTHERS to AMOUNT.

    Example:
      centwise add 0.1 0.2
    """
    settings = build_settings(options)
    total = _run(lambda: reduce(Money.add, others, Money(amount, settings)))
    click.echo(render(total, options["raw"]))


@click.command(context_settings=AMOUNT_COMMAND)
@click.argument("amount", callback=reject_unknown_options)
@click.argument("others", nargs=-1, required=True, callback=reject_unknown_options)
@display_options
def subtract(amount: str, others: tuple[str, ...], **options: Any) -> None:
    """
    Subtract OTHERS from AMOUNT.

    Example:
      centwise subtract 100 33.33 33.33
    """
    settings = build_settings(options)
    total = _run(lambda: reduce(Money.subtract, others, Money(amount, settings)))
    click.echo(render(total, options["raw"]))


@click.command(context_settings=AMOUNT_COMMAND)
@click.argument("amount", callback=reject_unknown_options)
@click.argument("factor", type=float)
@display_options
def multiply(amount: str, factor: float, **options: Any) -> None:
    """
    Multiply AMOUNT by FACTOR.

    Example:
      centwise multiply 19.99 3
    """
    settings = build_settings(options)
    product = _run(lambda: Money(amount, settings).multiply(factor))
    click.echo(render(product, options["raw"]))


@click.command(context_settings=AMOUNT_COMMAND)
@click.argument("amount", callback=reject_unknown_options)
@click.argument("divisor", callback=reject_unknown_options)
@display_options
def divide(amount: str, divisor: str, **options: Any) -> None:
    """
    Divide AMOUNT by DIVISOR.

    Example:
      centwise divide 100 3
    """
    settings = build_settings(options)
    quotient = _run(lambda: Money(amount, settings).divide(divisor))
    click.echo(render(quotient, options["raw"]))


@click.command(context_settings=AMOUNT_COMMAND)
@click.argument("amount", callback=reject_unknown_options)
@click.argument("count", type=click.IntRange(min=1))
@click.option("--json", "as_json", is_flag=True, help="Print the shares as a JSON array")
@display_options
def distribute(amount: str, count: int, as_json: bool, **options: Any) -> None:
    """
    Split AMOUNT into COUNT shares that add back up to AMOUNT.

    Leftover minor units go to the first shares.

    Example:
      centwise distribute 100 3
    """
    settings = build_settings(options)
    shares = _run(lambda: Money(amount, settings).distribute(count))

    if as_json:
        click.echo(format_json(shares))
        return

    for share in shares:
        click.echo(render(share, options["raw"]))

#!/usr/bin/env python3
"""
Amount Parser

Converts raw input (numbers, strings, or Money values) into integer minor units
according to a MoneySettings instance.

String input is parsed leniently: currency symbols, group separators and other
noise are dropped, and accounting-style parentheses mark a negative amount.
Anything that still cannot be read as a number becomes zero.
"""

import logging
import re
from decimal import Decimal
from numbers import Real
from typing import TYPE_CHECKING, Any

from .currency import round_half_away, to_minor_units
from .errors import InvalidInputError
from .settings import MoneySettings

if TYPE_CHECKING:
    from .money import Money

logger = logging.getLogger(__name__)

_PARENTHESES = re.compile(r"\((.*)\)")


def clean_amount_string(text: str, decimal: str = ".") -> str:
    """
    Reduce an amount string to digits, minus signs and a canonical decimal point.

    Args:
        text: Raw amount string like "$1,234.56" or "(1.99)"
        decimal: Decimal mark used in text

    Returns:
        Cleaned string, possibly empty

    Examples:
        clean_amount_string("$1,234.56") -> "1234.56"
        clean_amount_string("(1.99)") -> "-1.99"
        clean_amount_string("1.234,56 EUR", decimal=",") -> "1234.56"
    """
    text = _PARENTHESES.sub(r"-\1", text, count=1)
    noise = re.compile(f"[^-\\d{re.escape(decimal)}]")
    return noise.sub("", text).replace(decimal, ".")


def parse_amount_string(text: str, decimal: str = ".") -> float:
    """Parse an amount string into major units, 0.0 when nothing numeric is left."""
    cleaned = clean_amount_string(text, decimal)
    try:
        return float(cleaned) if cleaned else 0.0
    except ValueError:
        logger.debug("Could not parse amount %r (cleaned to %r), using 0", text, cleaned)
        return 0.0


def _to_number(value: Any, settings: MoneySettings) -> float:
    from .money import Money

    match value:
        case Money():
            return value.value
        case bool():
            pass
        case Real() | Decimal():
            return float(value)
        case str():
            return parse_amount_string(value, settings.decimal)

    if settings.error_on_invalid:
        raise InvalidInputError(value)
    logger.debug("Unsupported amount %r treated as 0", value)
    return 0.0


def parse(value: "Money | Real | str", settings: MoneySettings, use_rounding: bool = True) -> int | float:
    """
    Convert an amount into minor units.

    Numbers and Money values are taken as major units and scaled by
    10**precision, unless settings.from_cents is set, in which case they are
    already minor units (a Money value then contributes its int_value as is).

    Args:
        value: Number, amount string, or Money
        settings: Settings governing decimal mark, precision and error policy
        use_rounding: Round to an integer; division passes False to keep the
            scaled divisor unrounded

    Returns:
        Minor units (int), or a float when use_rounding is False

    Raises:
        InvalidInputError: If the type is unsupported and settings.error_on_invalid is set
        OverflowError: If the amount is infinite
        ValueError: If the amount is NaN

    Examples:
        parse("$12.34", DEFAULT_SETTINGS) -> 1234
        parse(0.1, DEFAULT_SETTINGS) -> 10
        parse(1234, MoneySettings(from_cents=True)) -> 1234
    """
    from .money import Money

    if settings.from_cents and isinstance(value, Money):
        return value.int_value

    number = _to_number(value, settings)

    if settings.from_cents:
        return round_half_away(number) if use_rounding else number
    return to_minor_units(number, settings.precision, use_rounding)

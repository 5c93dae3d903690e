#!/usr/bin/env python3
"""
Money Formatting

Renders Money values for display using the patterns, symbol, separators and
grouping rule of their settings.

Patterns use two placeholders:
- ``!`` for the symbol
- ``#`` for the grouped amount
"""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from .currency import group_digits
from .settings import Formatter, MoneySettings

if TYPE_CHECKING:
    from .money import Money


def split_fixed(fixed: str) -> tuple[str, str]:
    """
    Split a fixed-point string into unsigned major and minor digit strings.

    Examples:
        split_fixed("-1234.50") -> ("1234", "50")
        split_fixed("12") -> ("12", "")
    """
    major, _, minor = fixed.removeprefix("-").partition(".")
    return major, minor


def default_formatter(money: "Money", settings: MoneySettings) -> str:
    """
    Built-in formatter.

    Digits come from the canonical string so display always matches to_string()
    (including increment rounding); the sign only selects the pattern.
    """
    major, minor = split_fixed(money.to_string())
    amount = group_digits(major, settings.separator, settings.use_vedic)
    if minor:
        amount += settings.decimal + minor

    pattern = settings.pattern if money.value >= 0 else settings.negative_pattern
    return pattern.replace("!", settings.symbol, 1).replace("#", amount, 1)


def format_money(
    money: "Money", options: Formatter | MoneySettings | Mapping[str, Any] | None = None
) -> str:
    """
    Format a Money value.

    Args:
        money: Value to format
        options: Overrides merged over money.settings for this call only, or a
            formatter function, which is called as options(money, money.settings)
            and its result returned as is

    Returns:
        Display string
    """
    if callable(options):
        return options(money, money.settings)

    settings = money.settings.merge(options)
    formatter = settings.formatter or default_formatter
    return formatter(money, settings)

"""
Core Package

Fixed-point money arithmetic and formatting.

This package provides:
- Money, an immutable amount stored as integer minor units
- MoneySettings, the parsing and display configuration carried by each value
- The amount parser and formatter used by Money
- Environment configuration and JSON helpers for the command-line tools
"""

from .currency import group_digits, round_half_away, scale_factor, to_fixed, to_minor_units
from .errors import InvalidInputError
from .formatting import default_formatter, format_money
from .money import Money
from .parser import clean_amount_string, parse
from .settings import DEFAULT_SETTINGS, MoneySettings

__all__ = [
    "DEFAULT_SETTINGS",
    "InvalidInputError",
    "Money",
    "MoneySettings",
    "clean_amount_string",
    "default_formatter",
    "format_money",
    "group_digits",
    "parse",
    "round_half_away",
    "scale_factor",
    "to_fixed",
    "to_minor_units",
]

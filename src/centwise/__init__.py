"""
centwise - Fixed-Point Money Arithmetic

Money math on integer minor units instead of binary floats, so that
0.1 + 0.2 is 0.30 and splitting $100.00 three ways adds back up to $100.00.

Key Features:
- Lenient parsing of numbers, amount strings like "$1,234.56" or "(1.99)", and Money values
- Exact add/subtract, rounded multiply/divide, penny-exact distribution
- Formatting with symbols, patterns, separators and South-Asian digit grouping
- Configurable precision, display increment and minor-unit input

Example Usage:
    from centwise import Money

    Money("$1,234.56").add(0.44).format()  # "$1,235.00"
    [str(share) for share in Money(100).distribute(3)]  # ["33.34", "33.33", "33.33"]

Version: 0.1.0
"""

__version__ = "0.1.0"
__author__ = "centwise contributors"

from .core.errors import InvalidInputError
from .core.formatting import format_money
from .core.money import Money
from .core.parser import parse
from .core.settings import DEFAULT_SETTINGS, MoneySettings

__all__ = [
    "DEFAULT_SETTINGS",
    "InvalidInputError",
    "Money",
    "MoneySettings",
    "format_money",
    "parse",
]

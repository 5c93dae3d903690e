#!/usr/bin/env python3
"""
Money Primitive Type

Immutable fixed-point amount that stores integer minor units (e.g. cents).
Prevents floating-point errors by doing all arithmetic on the integer and
only rescaling for display.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from numbers import Real
from typing import Any, Union

from .currency import to_fixed
from .formatting import format_money
from .parser import parse
from .settings import Formatter, MoneySettings

Amount = Union["Money", Real, Decimal, str]


@dataclass(frozen=True, init=False, eq=False)
class Money:
    """
    Immutable money value in minor units.

    Every operation parses its operand with this value's settings and returns
    a new Money carrying the same settings, so chained calls stay consistent.

    Examples:
        >>> str(Money(0.1).add(0.2))
        '0.30'

        >>> Money("(1.99)").to_string()
        '-1.99'

        >>> [str(share) for share in Money(100).distribute(3)]
        ['33.34', '33.33', '33.33']

        >>> Money(1234567).format()
        '$1,234,567.00'

        >>> Money(1234567, use_vedic=True).format()
        '$12,34,567.00'
    """

    int_value: int
    settings: MoneySettings

    def __init__(
        self,
        value: Amount = 0,
        settings: MoneySettings | Mapping[str, Any] | None = None,
        **overrides: Any,
    ):
        """
        Parse an amount.

        Args:
            value: Number, amount string like "$1,234.56", or another Money
            settings: MoneySettings or mapping of overrides for the defaults
            **overrides: Individual settings applied on top of settings

        Raises:
            InvalidInputError: If value has an unsupported type and error_on_invalid is set
        """
        resolved = MoneySettings.coerce(settings).merge(overrides or None)
        object.__setattr__(self, "int_value", parse(value, resolved))
        object.__setattr__(self, "settings", resolved)

    @classmethod
    def from_minor_units(
        cls, int_value: int, settings: MoneySettings | Mapping[str, Any] | None = None
    ) -> "Money":
        """
        Create Money from an exact number of minor units, bypassing the parser.

        Args:
            int_value: Minor units (1234 = 12.34 at precision 2)
            settings: MoneySettings or mapping of overrides for the defaults

        Returns:
            Money object
        """
        if isinstance(int_value, bool) or not isinstance(int_value, int):
            raise TypeError(f"int_value must be an int, got {int_value!r}")
        money = cls.__new__(cls)
        object.__setattr__(money, "int_value", int_value)
        object.__setattr__(money, "settings", MoneySettings.coerce(settings))
        return money

    def _derive(self, int_value: int) -> "Money":
        return self.from_minor_units(int_value, self.settings)

    @property
    def precision(self) -> int:
        """Number of fractional digits."""
        return self.settings.precision

    @property
    def scale(self) -> int:
        """Scale factor between major and minor units."""
        return self.settings.scale

    @property
    def value(self) -> float:
        """Amount in major units, for display and interop only."""
        return self.int_value / self.scale

    # Arithmetic

    def add(self, other: Amount) -> "Money":
        """Add an amount parsed with this value's settings."""
        return self._derive(self.int_value + parse(other, self.settings))

    def subtract(self, other: Amount) -> "Money":
        """Subtract an amount parsed with this value's settings."""
        return self._derive(self.int_value - parse(other, self.settings))

    def multiply(self, factor: Real | str) -> "Money":
        """
        Multiply by a dimensionless factor.

        The factor is a plain number, not an amount, so it is never scaled to
        minor units. The product is re-parsed, which rounds it to a whole
        number of minor units.
        """
        product = self.int_value * float(factor)
        if self.settings.from_cents:
            return Money(product, self.settings)
        return Money(product / self.scale, self.settings)

    def divide(self, divisor: Amount) -> "Money":
        """
        Divide by an amount parsed with this value's settings.

        Raises:
            ZeroDivisionError: If the divisor parses to zero
        """
        quotient = self.int_value / parse(divisor, self.settings, use_rounding=False)
        return Money(quotient, self.settings)

    def distribute(self, count: int) -> list["Money"]:
        """
        Split the amount into count shares as evenly as possible.

        Minor units left over by the integer split go one by one to the first
        shares, so the shares always add up to the original amount and differ
        by at most one minor unit. Negative amounts hand out negative units.

        Args:
            count: Number of shares, a positive integer

        Returns:
            List of count Money values

        Raises:
            TypeError: If count is not an int
            ValueError: If count is not positive

        Example:
            Money(-100).distribute(3) -> [-33.34, -33.33, -33.33]
        """
        if isinstance(count, bool) or not isinstance(count, int):
            raise TypeError(f"count must be an int, got {count!r}")
        if count <= 0:
            raise ValueError(f"count must be positive, got {count}")

        if self.int_value >= 0:
            share, step = self.int_value // count, 1
        else:
            share, step = -(-self.int_value // count), -1
        leftover = abs(self.int_value - share * count)

        return [self._derive(share + step if index < leftover else share) for index in range(count)]

    def dollars(self) -> int:
        """Get the major-unit part, truncated toward zero."""
        whole = abs(self.int_value) // self.scale
        return -whole if self.int_value < 0 else whole

    def cents(self) -> int:
        """Get the minor-unit remainder, with the sign of the amount."""
        part = abs(self.int_value) % self.scale
        return -part if self.int_value < 0 else part

    # Conversions

    def format(self, options: Formatter | MoneySettings | Mapping[str, Any] | None = None) -> str:
        """
        Format for display.

        Args:
            options: Per-call setting overrides, or a formatter function called
                as options(money, settings)

        Returns:
            Display string like "$1,234.56"
        """
        return format_money(self, options)

    def to_string(self) -> str:
        """Get the canonical fixed-point string, rounded to the display increment."""
        return to_fixed(self.int_value, self.precision, self.settings.resolved_increment)

    def value_of(self) -> float:
        """Get the numeric value of the canonical string."""
        return float(self.to_string())

    def to_json(self) -> float:
        """Value for JSON serialization (the raw major-unit float)."""
        return self.value

    @property
    def _exact(self) -> Fraction:
        return Fraction(self.int_value, self.scale)

    # Operators

    @staticmethod
    def _is_amount(other: object) -> bool:
        return isinstance(other, (Money, Real, Decimal, str)) and not isinstance(other, bool)

    def __add__(self, other: Amount) -> "Money":
        """Add an amount."""
        if not self._is_amount(other):
            return NotImplemented
        return self.add(other)

    __radd__ = __add__

    def __sub__(self, other: Amount) -> "Money":
        """Subtract an amount."""
        if not self._is_amount(other):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: Amount) -> "Money":
        """Subtract this value from an amount."""
        if not self._is_amount(other):
            return NotImplemented
        return Money(other, self.settings).subtract(self)

    def __mul__(self, factor: Real) -> "Money":
        """Multiply by a number."""
        if isinstance(factor, bool) or not isinstance(factor, (Real, Decimal)):
            return NotImplemented
        return self.multiply(factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: Amount) -> "Money":
        """Divide by an amount."""
        if not self._is_amount(divisor):
            return NotImplemented
        return self.divide(divisor)

    def __neg__(self) -> "Money":
        return self._derive(-self.int_value)

    def __abs__(self) -> "Money":
        return self._derive(abs(self.int_value))

    def __float__(self) -> float:
        return self.value_of()

    def __eq__(self, other: object) -> bool:
        """Check equality of amounts (settings are not compared)."""
        if not isinstance(other, Money):
            return NotImplemented
        return self._exact == other._exact

    def __lt__(self, other: "Money") -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self._exact < other._exact

    def __le__(self, other: "Money") -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self._exact <= other._exact

    def __gt__(self, other: "Money") -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self._exact > other._exact

    def __ge__(self, other: "Money") -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self._exact >= other._exact

    def __hash__(self) -> int:
        return hash(self._exact)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Money(int_value={self.int_value}, precision={self.precision})"

#!/usr/bin/env python3
"""
Money Settings

Immutable configuration shared by a Money value and every value derived from it.

Settings control how raw input is parsed (precision, decimal mark, whether input is
already in minor units) and how values are displayed (symbol, grouping, patterns).
Overrides are always applied to a copy; the shared defaults are never mutated.
"""

import math
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from decimal import Decimal
from fractions import Fraction
from numbers import Real
from typing import TYPE_CHECKING, Any, Callable, Union

if TYPE_CHECKING:
    from .money import Money

Formatter = Callable[["Money", "MoneySettings"], str]


@dataclass(frozen=True)
class MoneySettings:
    """
    Parsing and display configuration for Money values.

    Attributes:
        symbol: Replaces ``!`` in the patterns
        separator: Digit group separator
        decimal: Decimal mark used both for parsing and display
        precision: Number of fractional digits (scale factor is 10**precision)
        increment: Smallest displayed step in major units, a non-negative real number
            or Decimal (None or 0 means one minor unit)
        error_on_invalid: Raise InvalidInputError for unsupported input types
        use_vedic: Use South-Asian grouping (12,34,567) instead of 1,234,567
        pattern: Template for non-negative values
        negative_pattern: Template for negative values
        from_cents: Treat numeric and Money input as minor units
        formatter: Replacement for the built-in formatter
    """

    symbol: str = "$"
    separator: str = ","
    decimal: str = "."
    precision: int = 2
    increment: Real | Decimal | None = None
    error_on_invalid: bool = False
    use_vedic: bool = False
    pattern: str = "!#"
    negative_pattern: str = "-!#"
    from_cents: bool = False
    formatter: Formatter | None = None

    def __post_init__(self) -> None:
        if isinstance(self.precision, bool) or not isinstance(self.precision, int) or self.precision < 0:
            raise ValueError(f"precision must be a non-negative integer, got {self.precision!r}")
        if not self.decimal:
            raise ValueError("decimal mark must be a non-empty string")
        increment = self.increment
        if increment is not None:
            if isinstance(increment, bool) or not isinstance(increment, (Real, Decimal)):
                raise ValueError(f"increment must be a number, got {increment!r}")
            if not math.isfinite(increment) or increment < 0:
                raise ValueError(f"increment must be a non-negative finite number, got {increment!r}")

    @property
    def scale(self) -> int:
        """Scale factor between major and minor units."""
        return 10**self.precision

    @property
    def resolved_increment(self) -> Real | Decimal:
        """Rounding increment for display, defaulting to exactly one minor unit."""
        return self.increment or Fraction(1, self.scale)

    def merge(self, overrides: Union["MoneySettings", Mapping[str, Any], None]) -> "MoneySettings":
        """
        Return a copy with overrides applied.

        Args:
            overrides: Mapping of field names to values, or another MoneySettings
                (whose fields all win)

        Returns:
            New MoneySettings; self is left untouched

        Raises:
            TypeError: If a key is not a settings field
        """
        if overrides is None:
            return self
        if isinstance(overrides, MoneySettings):
            return overrides

        known = {f.name for f in fields(self)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise TypeError(f"Unknown money settings: {', '.join(unknown)}")
        return replace(self, **dict(overrides))

    @classmethod
    def coerce(cls, settings: Union["MoneySettings", Mapping[str, Any], None]) -> "MoneySettings":
        """Build settings from None, an existing instance, or overrides of the defaults."""
        if isinstance(settings, MoneySettings):
            return settings
        return DEFAULT_SETTINGS.merge(settings)


DEFAULT_SETTINGS = MoneySettings()

#!/usr/bin/env python3
"""
Currency Arithmetic Helpers

Low-level conversions between major units, minor units and display strings.

Currency Representation:
- Storage uses integer minor units: 100 minor units = 1.00 at precision 2
- Scale factor is 10**precision
- Display uses fixed-point strings: "1234.50"

Key Principles:
- Rounding is always half away from zero
- Scaled floats are cut to 4 decimal places before rounding, so binary residue
  such as 1.005 * 100 = 100.49999999999999 cannot flip the rounding direction
- Display rounding is done in exact decimal arithmetic
"""

import math
from decimal import ROUND_HALF_UP, Context, Decimal
from numbers import Rational, Real

# Extra decimal places kept when scaling a major-unit float to minor units
SCALE_GUARD_DIGITS = 4


def scale_factor(precision: int) -> int:
    """
    Get the multiplier between major and minor units.

    Example:
        scale_factor(2) -> 100
    """
    return 10**precision


def _check_finite(value: float) -> None:
    if math.isnan(value):
        raise ValueError("Cannot round NaN to an amount")
    if math.isinf(value):
        raise OverflowError(f"Cannot round {value} to an amount")


def round_half_away(value: Real | str) -> int:
    """
    Round to the nearest integer, ties away from zero.

    Args:
        value: Number or numeric string

    Returns:
        Rounded integer

    Raises:
        OverflowError: If value is infinite
        ValueError: If value is NaN

    Examples:
        round_half_away(2.5) -> 3
        round_half_away(-2.5) -> -3
    """
    if not isinstance(value, str):
        _check_finite(float(value))
    return int(Decimal(value).to_integral_value(rounding=ROUND_HALF_UP))


def truncate_scaled(value: float) -> float:
    """
    Cut a scaled float to SCALE_GUARD_DIGITS decimal places.

    Example:
        truncate_scaled(1.005 * 100) -> 100.5
    """
    _check_finite(value)
    return float(f"{value:.{SCALE_GUARD_DIGITS}f}")


def to_minor_units(value: float, precision: int, use_rounding: bool = True) -> int | float:
    """
    Scale a major-unit number to minor units.

    Args:
        value: Amount in major units
        precision: Number of fractional digits
        use_rounding: Round to an integer (False keeps the truncated float)

    Returns:
        Minor units, an int unless use_rounding is False

    Examples:
        to_minor_units(12.34, 2) -> 1234
        to_minor_units(1.005, 2) -> 101
    """
    scaled = truncate_scaled(value * scale_factor(precision))
    return round_half_away(scaled) if use_rounding else scaled


def _exact_context(int_value: int, precision: int) -> Context:
    # Enough digits for the whole amount plus its fraction and the increment quotient
    digits = len(str(abs(int_value))) + precision + 16
    return Context(prec=max(28, digits), rounding=ROUND_HALF_UP)


def _decimal_step(increment: Real | Decimal, ctx: Context) -> Decimal:
    if isinstance(increment, Decimal):
        return increment
    if isinstance(increment, Rational):
        return ctx.divide(Decimal(increment.numerator), Decimal(increment.denominator))
    # Shortest repr: 0.05 becomes Decimal("0.05")
    return Decimal(repr(float(increment)))


def to_fixed(int_value: int, precision: int, increment: Real | Decimal | None = None) -> str:
    """
    Render minor units as a fixed-point string, rounded to an increment.

    The amount is first rounded to the nearest multiple of increment, then to
    exactly ``precision`` fractional digits. Both steps round half away from zero.

    Args:
        int_value: Amount in minor units
        precision: Number of fractional digits
        increment: Display step in major units, any real number or Decimal
            (None or 0 means one minor unit)

    Returns:
        Fixed-point string without grouping or symbol

    Examples:
        to_fixed(1234, 2) -> "12.34"
        to_fixed(-5, 2) -> "-0.05"
        to_fixed(103, 2, increment=0.05) -> "1.05"
        to_fixed(103, 2, increment=Fraction(1, 20)) -> "1.05"
    """
    ctx = _exact_context(int_value, precision)
    amount = ctx.divide(Decimal(int_value), Decimal(scale_factor(precision)))

    if increment:
        step = _decimal_step(increment, ctx)
        steps = ctx.divide(amount, step).to_integral_value(rounding=ROUND_HALF_UP)
        amount = ctx.multiply(steps, step)

    quantum = Decimal(1).scaleb(-precision)
    fixed = amount.quantize(quantum, context=ctx)
    if fixed.is_zero():
        fixed = fixed.copy_abs()  # no "-0.00"
    return f"{fixed:f}"


def _is_group_boundary(remaining: int, use_vedic: bool) -> bool:
    if use_vedic:
        # 3 digits in the last group, 2 in each one before it
        return remaining >= 3 and remaining % 2 == 1
    return remaining > 0 and remaining % 3 == 0


def group_digits(digits: str, separator: str = ",", use_vedic: bool = False) -> str:
    """
    Insert group separators into a string of integer digits.

    A separator is placed after every digit followed by a whole number of
    groups. Uniform grouping uses groups of 3; vedic grouping keeps the last
    group at 3 digits and groups the rest in pairs.

    Args:
        digits: Unsigned integer digits
        separator: Separator to insert
        use_vedic: Use South-Asian grouping

    Returns:
        Grouped digits

    Examples:
        group_digits("1234567") -> "1,234,567"
        group_digits("1234567", use_vedic=True) -> "12,34,567"
        group_digits("123") -> "123"
    """
    grouped = []
    length = len(digits)
    for index, digit in enumerate(digits):
        grouped.append(digit)
        if _is_group_boundary(length - index - 1, use_vedic):
            grouped.append(separator)
    return "".join(grouped)

"""Constants and convenience predicates over ``decimal.Decimal``.

These are the thin value-type helpers the elementary functions rely on:
integer/parity tests, sign, clamping and interval membership.
"""

from __future__ import annotations

import sys
from decimal import ROUND_FLOOR, Decimal

from decimath.core.errors import PreconditionError

ZERO = Decimal("0")
ONE = Decimal("1")
TWO = Decimal("2")
HALF = Decimal("0.5")

# Threshold between the native context power and iterative squaring.
PLATFORM_INT_MAX = sys.maxsize


def as_decimal(value: Decimal | int) -> Decimal:
    """Return ``value`` as a Decimal. Integers convert exactly."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Decimal(value)
    raise PreconditionError("as_decimal", f"expected Decimal or int, got {type(value).__name__}")


def is_integer(value: Decimal | int) -> bool:
    """True if ``value`` is finite and has no fractional part."""
    if isinstance(value, int):
        return True
    return value.is_finite() and value == value.to_integral_value(rounding=ROUND_FLOOR)


def require_integer(value: Decimal | int, function: str = "require_integer") -> int:
    """Return ``value`` as a Python int, or raise PreconditionError."""
    if not is_integer(value):
        raise PreconditionError(function, "must be an integer", value)
    return int(value)


def is_even(value: Decimal | int) -> bool:
    return require_integer(value, "is_even") % 2 == 0


def is_odd(value: Decimal | int) -> bool:
    return require_integer(value, "is_odd") % 2 == 1


def signum(value: Decimal) -> int:
    """-1, 0 or 1 according to the sign of ``value``."""
    if value > ZERO:
        return 1
    if value < ZERO:
        return -1
    return 0


def clamp(value: Decimal, minimum: Decimal, maximum: Decimal) -> Decimal:
    """Standard interval clamping: ``max(min(value, maximum), minimum)``."""
    return max(min(value, maximum), minimum)


def in_interval(
    value: Decimal,
    low: Decimal,
    high: Decimal,
    *,
    low_inclusive: bool = True,
    high_inclusive: bool = True,
) -> bool:
    """Interval membership with independently inclusive/exclusive bounds."""
    above = value >= low if low_inclusive else value > low
    below = value <= high if high_inclusive else value < high
    return above and below

"""pi, the six trigonometric functions and their inverses.

pi comes from the BBP series by default (Chudnovsky is available as a faster
strategy). sin and cos reduce the angle by the nearest multiple of pi/2 and
evaluate a Maclaurin series of the reduced angle. Inverse functions solve
with Newton-Raphson.

As elsewhere in decimath, public functions work at GUARD_DIGITS extra
precision and round back with the caller's context. The sin/cos family adds
one more digit per integer digit of the angle.
"""

from __future__ import annotations

from decimal import ROUND_HALF_EVEN, Context, Decimal
from enum import Enum

from decimath.core.context import GUARD_DIGITS, working_context
from decimath.core.errors import DomainError
from decimath.core.numbers import ONE, TWO, ZERO, in_interval, signum
from decimath.elementary.exponentiation import integer_exponentiation
from decimath.elementary.root_extraction import _halley
from decimath.helpers.newton import NewtonRaphsonProvider
from decimath.helpers.suppliers import FactorialSupplier
from decimath.helpers.summation import Summation


class PiStrategy(Enum):
    """Series used to compute pi."""

    BBP = "bbp"  # slower, tightly controlled rounding
    CHUDNOVSKY = "chudnovsky"  # ~14 digits per term


# ---------------------------------------------------------------------------
# pi
# ---------------------------------------------------------------------------

_SIXTEEN = Decimal(16)

_CHUDNOVSKY_LINEAR = 545140134
_CHUDNOVSKY_CONSTANT = 13591409
_CHUDNOVSKY_BASE = -640320
_CHUDNOVSKY_SCALE = Decimal(426880)
_CHUDNOVSKY_RADICAND = Decimal(10005)


def _pi_bbp(context: Context) -> Decimal:
    """sum_k 16^-k [4/(8k+1) - 2/(8k+4) - 1/(8k+5) - 1/(8k+6)]."""
    def term(k: Decimal) -> Decimal:
        eight_k = 8 * int(k)
        bracket = context.subtract(
            context.subtract(
                context.subtract(
                    context.divide(Decimal(4), Decimal(eight_k + 1)),
                    context.divide(TWO, Decimal(eight_k + 4)),
                ),
                context.divide(ONE, Decimal(eight_k + 5)),
            ),
            context.divide(ONE, Decimal(eight_k + 6)),
        )
        return context.divide(bracket, integer_exponentiation(_SIXTEEN, k, context))

    return Summation(term).sum_infinite(0, context)


def _pi_chudnovsky(context: Context) -> Decimal:
    """pi = 426880 sqrt(10005) / sum_k (6k)! (13591409 + 545140134k) / ((3k)! (k!)^3 (-640320)^(3k))."""
    six_k = FactorialSupplier(0, context)
    three_k = FactorialSupplier(0, context)
    single_k = FactorialSupplier(0, context)

    def term(k: Decimal) -> Decimal:
        i = int(k)
        numerator = context.multiply(
            six_k.next_pre(6), Decimal(_CHUDNOVSKY_CONSTANT + _CHUDNOVSKY_LINEAR * i),
        )
        denominator = context.multiply(
            context.multiply(three_k.next_pre(3), integer_exponentiation(single_k.next_pre(), 3, context)),
            Decimal(_CHUDNOVSKY_BASE ** (3 * i)),
        )
        return context.divide(numerator, denominator)

    series = Summation(term).sum_infinite(0, context)
    root = _halley(_CHUDNOVSKY_RADICAND, 2, context)
    return context.divide(context.multiply(_CHUDNOVSKY_SCALE, root), series)


def _pi(context: Context, strategy: PiStrategy = PiStrategy.BBP) -> Decimal:
    if strategy is PiStrategy.CHUDNOVSKY:
        return _pi_chudnovsky(context)
    return _pi_bbp(context)


def pi(context: Context, strategy: PiStrategy = PiStrategy.BBP) -> Decimal:
    """pi rounded to ``context``."""
    return context.plus(_pi(working_context(context), strategy))


# ---------------------------------------------------------------------------
# sin / cos -- quadrant reduction + Maclaurin series
# ---------------------------------------------------------------------------


def _reduce(angle: Decimal, context: Context, pi_value: Decimal) -> tuple[Decimal, int]:
    """Split angle = r + n pi/2 with n = round(2 angle / pi); return (r, n mod 4)."""
    half_pi = context.divide(pi_value, TWO)
    n = context.divide(angle, half_pi).to_integral_value(rounding=ROUND_HALF_EVEN)
    reduced = context.subtract(angle, context.multiply(n, half_pi))
    return reduced, int(n) % 4


def _maclaurin(x: Decimal, context: Context, first: int) -> Decimal:
    """sum_n (-1)^n x^(2n+first) / (2n+first)!; first=1 gives sin, first=0 cos."""
    factorials = FactorialSupplier(first, context)

    def term(n: Decimal) -> Decimal:
        i = int(n)
        numerator = integer_exponentiation(x, 2 * i + first, context)
        if i % 2:
            numerator = context.minus(numerator)
        return context.divide(numerator, factorials.next_pre(2))

    return Summation(term).sum_infinite(0, context)


def _quadrant_sin(reduced: Decimal, quadrant: int, context: Context) -> Decimal:
    # 0: sin r, 1: cos r, 2: -sin r, 3: -cos r
    value = _maclaurin(reduced, context, first=1 if quadrant % 2 == 0 else 0)
    return context.minus(value) if quadrant >= 2 else value


def _angle_context(angle: Decimal, context: Context) -> Context:
    """Working context for a sin/cos family call on ``angle``.

    Subtracting the nearest multiple of pi/2 cancels the integer digits of
    ``angle``, so pi and the reduction carry that many extra digits.
    """
    return working_context(context, GUARD_DIGITS + max(0, angle.adjusted()))


def _sin(angle: Decimal, context: Context, pi_value: Decimal) -> Decimal:
    reduced, quadrant = _reduce(angle, context, pi_value)
    return _quadrant_sin(reduced, quadrant, context)


def _cos(angle: Decimal, context: Context, pi_value: Decimal) -> Decimal:
    # cos x = sin(x + pi/2): same reduced angle, one quadrant further on.
    reduced, quadrant = _reduce(angle, context, pi_value)
    return _quadrant_sin(reduced, (quadrant + 1) % 4, context)


def sin(angle: Decimal, context: Context) -> Decimal:
    working = _angle_context(angle, context)
    return context.plus(_sin(angle, working, _pi(working)))


def cos(angle: Decimal, context: Context) -> Decimal:
    working = _angle_context(angle, context)
    return context.plus(_cos(angle, working, _pi(working)))


# ---------------------------------------------------------------------------
# tan / csc / sec / cot -- derived from sin and cos
# ---------------------------------------------------------------------------


def _tan(angle: Decimal, context: Context, pi_value: Decimal) -> Decimal:
    return context.divide(_sin(angle, context, pi_value), _cos(angle, context, pi_value))


def tan(angle: Decimal, context: Context) -> Decimal:
    working = _angle_context(angle, context)
    return context.plus(_tan(angle, working, _pi(working)))


def csc(angle: Decimal, context: Context) -> Decimal:
    """1 / sin(angle). Raises DivisionByZero where sin is exactly zero."""
    working = _angle_context(angle, context)
    return context.plus(working.divide(ONE, _sin(angle, working, _pi(working))))


def sec(angle: Decimal, context: Context) -> Decimal:
    working = _angle_context(angle, context)
    return context.plus(working.divide(ONE, _cos(angle, working, _pi(working))))


def cot(angle: Decimal, context: Context) -> Decimal:
    working = _angle_context(angle, context)
    pi_value = _pi(working)
    return context.plus(working.divide(_cos(angle, working, pi_value), _sin(angle, working, pi_value)))


# ---------------------------------------------------------------------------
# arcsin / arccos -- Newton-Raphson on sin(y) - x and cos(y) - x
# ---------------------------------------------------------------------------


def _require_unit_interval(function: str, x: Decimal) -> None:
    if not in_interval(x, -ONE, ONE):
        raise DomainError(function, "requires -1 <= x <= 1", x)


def _arcsin(x: Decimal, context: Context, pi_value: Decimal) -> Decimal:
    _require_unit_interval("arcsin", x)
    half_pi = context.divide(pi_value, TWO)
    if x == ZERO:
        return ZERO
    if x == ONE:
        return half_pi
    if x == -ONE:
        return context.minus(half_pi)
    solver = NewtonRaphsonProvider(
        f=lambda y: context.subtract(_sin(y, context, pi_value), x),
        f_prime=lambda y: _cos(y, context, pi_value),
        minimum=context.minus(half_pi),
        maximum=half_pi,
    )
    # |arcsin x| >= |x|, so starting at x approaches the root from the
    # side where sin's curvature keeps the iterates from overshooting.
    return solver.solve(x, context)


def _arccos(x: Decimal, context: Context, pi_value: Decimal) -> Decimal:
    _require_unit_interval("arccos", x)
    half_pi = context.divide(pi_value, TWO)
    if x == ZERO:
        return half_pi
    if x == ONE:
        return ZERO
    if x == -ONE:
        return pi_value
    solver = NewtonRaphsonProvider(
        f=lambda y: context.subtract(_cos(y, context, pi_value), x),
        f_prime=lambda y: context.minus(_sin(y, context, pi_value)),
        minimum=ZERO,
        maximum=pi_value,
    )
    # Mirror image of the arcsin start: y = pi/2 - x.
    return solver.solve(context.subtract(half_pi, x), context)


def arcsin(x: Decimal, context: Context) -> Decimal:
    """Inverse sine on [-1, 1], in [-pi/2, pi/2].

    Raises
    ------
    DomainError
        If |x| > 1.
    """
    working = working_context(context)
    return context.plus(_arcsin(x, working, _pi(working)))


def arccos(x: Decimal, context: Context) -> Decimal:
    """Inverse cosine on [-1, 1], in [0, pi].

    Raises
    ------
    DomainError
        If |x| > 1.
    """
    working = working_context(context)
    return context.plus(_arccos(x, working, _pi(working)))


# ---------------------------------------------------------------------------
# arctan -- reflection for |x| > 1, Newton-Raphson with periodic clamping
# ---------------------------------------------------------------------------


def _wrap_half_period(y: Decimal, context: Context, pi_value: Decimal) -> Decimal:
    """Reduce y modulo pi into [-pi/2, pi/2]."""
    turns = context.divide(y, pi_value).to_integral_value(rounding=ROUND_HALF_EVEN)
    if turns == ZERO:
        return y
    return context.subtract(y, context.multiply(turns, pi_value))


def _arctan(x: Decimal, context: Context, pi_value: Decimal) -> Decimal:
    if x == ZERO:
        return ZERO
    half_pi = context.divide(pi_value, TWO)
    if x.copy_abs() > ONE:
        reflected = _arctan(context.divide(ONE, x), context, pi_value)
        return context.subtract(context.multiply(Decimal(signum(x)), half_pi), reflected)

    def sec_squared(y: Decimal) -> Decimal:
        cosine = _cos(y, context, pi_value)
        return context.divide(ONE, context.multiply(cosine, cosine))

    solver = NewtonRaphsonProvider(
        f=lambda y: context.subtract(_tan(y, context, pi_value), x),
        f_prime=sec_squared,
        clamping=lambda y: _wrap_half_period(y, context, pi_value),
        minimum=context.minus(half_pi),
        maximum=half_pi,
    )
    return solver.solve(x, context)


def arctan(x: Decimal, context: Context) -> Decimal:
    """Inverse tangent, in (-pi/2, pi/2)."""
    working = working_context(context)
    return context.plus(_arctan(x, working, _pi(working)))


# ---------------------------------------------------------------------------
# arccsc / arcsec / arccot -- reciprocal arguments
# ---------------------------------------------------------------------------


def arccsc(x: Decimal, context: Context) -> Decimal:
    """arcsin(1/x). Raises DivisionByZero at 0 and DomainError for |x| < 1."""
    working = working_context(context)
    return context.plus(_arcsin(working.divide(ONE, x), working, _pi(working)))


def arcsec(x: Decimal, context: Context) -> Decimal:
    """arccos(1/x). Raises DivisionByZero at 0 and DomainError for |x| < 1."""
    working = working_context(context)
    return context.plus(_arccos(working.divide(ONE, x), working, _pi(working)))


def arccot(x: Decimal, context: Context) -> Decimal:
    """arctan(1/x), shifted by pi for negative x; values in (0, pi)."""
    working = working_context(context)
    pi_value = _pi(working)
    if x == ZERO:
        return context.plus(working.divide(pi_value, TWO))
    result = _arctan(working.divide(ONE, x), working, pi_value)
    if x < ZERO:
        result = working.add(result, pi_value)
    return context.plus(result)

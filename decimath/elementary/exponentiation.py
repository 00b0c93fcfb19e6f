"""Powers, exponential and natural logarithm at caller-chosen precision.

Public functions compute on a working copy of the caller's context widened
by GUARD_DIGITS, then round back with the caller's context. No float, no
math module -- every intermediate computation is Decimal.

Functions
---------
integer_exponentiation : base^n for integer n (square-and-multiply past PLATFORM_INT_MAX)
ln2                    : ln(2) from sum 2 / (3 (2k+1) 9^k)
exp                    : e^x (range reduction by ln2 + Taylor series)
ln                     : ln(x) (halving/doubling into [0.5, 2) + atanh series)
power                  : base^exponent for real exponent
"""

from __future__ import annotations

from decimal import ROUND_HALF_EVEN, Context, Decimal

from decimath.core.context import working_context
from decimath.core.errors import DomainError
from decimath.core.numbers import (
    HALF,
    ONE,
    PLATFORM_INT_MAX,
    TWO,
    ZERO,
    as_decimal,
    is_even,
    is_integer,
    is_odd,
    require_integer,
)
from decimath.helpers.suppliers import FactorialSupplier
from decimath.helpers.summation import Summation

# ---------------------------------------------------------------------------
# integer_exponentiation
# ---------------------------------------------------------------------------


def _square_and_multiply(base: Decimal, exponent: int, context: Context) -> Decimal:
    """base^exponent for exponent >= 0 by iterative squaring."""
    result = ONE
    square = base
    while exponent > 0:
        if is_odd(exponent):
            result = context.multiply(result, square)
        exponent >>= 1
        if exponent:
            square = context.multiply(square, square)
    return result


def integer_exponentiation(base: Decimal, exponent: Decimal | int, context: Context) -> Decimal:
    """base^exponent for an integer exponent, under ``context`` as given.

    0^0 is 1 by convention. 0 to a negative power divides by zero and raises
    the context's DivisionByZero. Negative exponents give the reciprocal of
    the positive power.

    Raises
    ------
    PreconditionError
        If exponent is not an integer.
    """
    n = require_integer(exponent, "integer_exponentiation")
    if base == ZERO:
        if n > 0:
            return ZERO
        if n == 0:
            return ONE
        return context.divide(ONE, ZERO)
    if base == ONE or n == 0:
        return ONE
    if base == -ONE:
        return ONE if is_even(n) else -ONE
    if n < 0:
        return context.divide(ONE, integer_exponentiation(base, -n, context))
    if n <= PLATFORM_INT_MAX:
        return context.power(base, n)
    return _square_and_multiply(base, n, context)


# ---------------------------------------------------------------------------
# ln2
# ---------------------------------------------------------------------------


def _ln2(context: Context) -> Decimal:
    """ln(2) = sum_{k>=0} 2 / (3 (2k+1) 9^k), which is 2 atanh(1/3)."""
    def term(k: Decimal) -> Decimal:
        i = int(k)
        return context.divide(TWO, Decimal(3 * (2 * i + 1) * 9**i))

    return Summation(term).sum_infinite(0, context)


def ln2(context: Context) -> Decimal:
    """ln(2) rounded to ``context``. Recomputed on every call."""
    return context.plus(_ln2(working_context(context)))


# ---------------------------------------------------------------------------
# exp -- e^x via Taylor series with range reduction
# ---------------------------------------------------------------------------


def _exp_taylor(x: Decimal, context: Context) -> Decimal:
    """sum_{n>=0} x^n / n!, intended for |x| <= ln2/2."""
    factorials = FactorialSupplier(0, context)

    def term(n: Decimal) -> Decimal:
        return context.divide(integer_exponentiation(x, n, context), factorials.next_pre())

    return Summation(term).sum_infinite(0, context)


def _exp(x: Decimal, context: Context, log2: Decimal) -> Decimal:
    """exp(x) at working precision, with ln2 already computed.

    Writes x = k ln2 + r with k = round(x / ln2), so exp(x) = 2^k exp(r)
    and |r| <= ln2/2.
    """
    if x == ZERO:
        return ONE
    if x.copy_abs() <= context.multiply(log2, HALF):
        return _exp_taylor(x, context)
    k = context.divide(x, log2).to_integral_value(rounding=ROUND_HALF_EVEN)
    if k == ZERO:
        # |x| sits on ln2/2 and the quotient rounded down to 0.
        return _exp_taylor(x, context)
    r = context.subtract(x, context.multiply(k, log2))
    if k < ZERO:
        # 0.5^|k| underflows toward zero where 1 / 2^|k| would overflow first.
        scale = integer_exponentiation(HALF, context.minus(k), context)
    else:
        scale = integer_exponentiation(TWO, k, context)
    return context.multiply(scale, _exp(r, context, log2))


def exp(x: Decimal, context: Context) -> Decimal:
    """Compute e^x for arbitrary Decimal x, rounded to ``context``.

    Results below the context's smallest exponent underflow toward zero.

    Raises
    ------
    decimal.Overflow
        If e^x exceeds the context's Emax.
    """
    if x == ZERO:
        return context.plus(ONE)
    working = working_context(context)
    return context.plus(_exp(x, working, _ln2(working)))


# ---------------------------------------------------------------------------
# ln -- natural logarithm via range reduction + atanh series
# ---------------------------------------------------------------------------


def _atanh(t: Decimal, context: Context) -> Decimal:
    """sum_{j>=0} t^(2j+1) / (2j+1), for |t| < 1."""
    def term(j: Decimal) -> Decimal:
        odd = 2 * int(j) + 1
        return context.divide(integer_exponentiation(t, odd, context), Decimal(odd))

    return Summation(term).sum_infinite(0, context)


def _ln(x: Decimal, context: Context) -> Decimal:
    """ln(x) for x > 0 at working precision.

    Halves x >= 1 into [1, 2) or doubles x < 1 into [0.5, 1), counting the
    net shift k, so that ln(x) = k ln2 + 2 atanh((m-1)/(m+1)) with
    |(m-1)/(m+1)| <= 1/3. Both terms carry the sign of ln(x), so nothing
    cancels for x near 1.
    """
    if x <= ZERO:
        raise DomainError("ln", "requires x > 0", x)
    if x == ONE:
        return ZERO

    m = x
    k = 0
    while m >= TWO:
        m = context.divide(m, TWO)
        k += 1
    while m < HALF:
        m = context.multiply(m, TWO)
        k -= 1

    t = context.divide(context.subtract(m, ONE), context.add(m, ONE))
    reduced = context.multiply(TWO, _atanh(t, context))
    if k == 0:
        return reduced
    return context.add(context.multiply(Decimal(k), _ln2(context)), reduced)


def ln(x: Decimal, context: Context) -> Decimal:
    """Compute ln(x) for positive Decimal x, rounded to ``context``.

    Raises
    ------
    DomainError
        If x <= 0.
    """
    if x <= ZERO:
        raise DomainError("ln", "requires x > 0", x)
    return context.plus(_ln(x, working_context(context)))


# ---------------------------------------------------------------------------
# power -- base^exponent for real exponent
# ---------------------------------------------------------------------------


def _power(base: Decimal, exponent: Decimal, context: Context) -> Decimal:
    """base^exponent at working precision."""
    if is_integer(exponent):
        return integer_exponentiation(base, exponent, context)
    if base == ZERO:
        if exponent > ZERO:
            return ZERO
        return context.divide(ONE, ZERO)
    if base == -ONE:
        raise DomainError("power", "(-1)^y is undefined for non-integer y", base, exponent)
    # ln rejects negative bases, which is exactly the undefined case here.
    log_base = _ln(base, context)
    return _exp(context.multiply(exponent, log_base), context, _ln2(context))


def power(base: Decimal, exponent: Decimal | int, context: Context) -> Decimal:
    """Compute base^exponent, rounded to ``context``.

    Integer exponents go through integer_exponentiation (negative ones give
    the reciprocal). Otherwise exp(exponent * ln(base)).

    Raises
    ------
    DomainError
        If the exponent is not an integer and the base is negative.
    """
    working = working_context(context)
    return context.plus(_power(base, as_decimal(exponent), working))

"""n-th roots of a Decimal radicand.

Integer degrees use Halley's method from an initial guess of 1; real degrees
fall back to power(radicand, 1/degree).
"""

from __future__ import annotations

import logging
from decimal import Context, Decimal

from decimath.core.context import working_context
from decimath.core.errors import DomainError
from decimath.core.numbers import ONE, ZERO, as_decimal, is_integer, is_odd, require_integer
from decimath.elementary.exponentiation import _power, integer_exponentiation
from decimath.helpers.cache import Cache

logger = logging.getLogger(__name__)


def _halley(radicand: Decimal, n: int, context: Context) -> Decimal:
    """Positive ``n``-th root of a positive radicand at working precision.

    Halley iteration:
        r <- r * ((n-1) r^n + (n+1) a) / ((n+1) r^n + (n-1) a)
    starting at r = 1. Stops when a guess equals the previous one, or when
    rounding noise makes it revisit one of the last two guesses.
    """
    below = Decimal(n - 1)
    above = Decimal(n + 1)
    low_term = context.multiply(below, radicand)
    high_term = context.multiply(above, radicand)

    result = ONE
    seen = Cache(2, result)
    iterations = 0
    while True:
        iterations += 1
        powered = integer_exponentiation(result, n, context)
        numerator = context.add(context.multiply(below, powered), high_term)
        denominator = context.add(context.multiply(above, powered), low_term)
        guess = context.multiply(result, context.divide(numerator, denominator))
        if guess == result or seen.contains(guess):
            logger.debug("halley root settled after %d iterations", iterations)
            return guess if guess == result else result
        seen.update(guess)
        result = guess


def integer_root_extraction(radicand: Decimal, degree: Decimal | int, context: Context) -> Decimal:
    """Positive ``degree``-th root of a positive radicand by Halley's method, rounded to ``context``.

    Raises
    ------
    PreconditionError
        If degree is not an integer.
    """
    n = require_integer(degree, "integer_root_extraction")
    return context.plus(_halley(radicand, n, working_context(context)))


def real_root_extraction(radicand: Decimal, degree: Decimal, context: Context) -> Decimal:
    """radicand^(1/degree), rounded to ``context``."""
    working = working_context(context)
    return context.plus(_power(radicand, working.divide(ONE, degree), working))


def _root(radicand: Decimal, degree: Decimal, context: Context) -> Decimal:
    if radicand == ZERO and degree > ZERO:
        return ZERO
    if is_integer(degree):
        n = int(degree)
        if radicand > ZERO:
            if n > 0:
                return _halley(radicand, n, context)
            if n < 0:
                return context.divide(ONE, _halley(radicand, -n, context))
        elif radicand < ZERO and is_odd(n):
            return context.minus(_root(context.minus(radicand), degree, context))
    elif radicand > ZERO:
        return _power(radicand, context.divide(ONE, degree), context)
    raise DomainError("root_extraction", "undefined for this radicand and degree", radicand, degree)


def root_extraction(radicand: Decimal, degree: Decimal | int, context: Context) -> Decimal:
    """The ``degree``-th root of ``radicand``, rounded to ``context``.

    Raises
    ------
    DomainError
        For even roots of negative numbers, zeroth roots, roots of zero with
        non-positive degree, and non-integer degrees of non-positive radicands.
    """
    working = working_context(context)
    return context.plus(_root(radicand, as_decimal(degree), working))

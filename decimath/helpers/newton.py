"""Damped Newton-Raphson root solver over Decimal.

Halts when the next guess equals the previous result (converged) or when it
is already in a 2-entry cache (cycling between guesses at the precision
boundary). Either way the clamped last result is returned.

A zero derivative surfaces as the context's DivisionByZero; no
derivative-consistency check is made.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from decimal import Context, Decimal
from typing import TypeAlias, final

from decimath.core.numbers import clamp
from decimath.helpers.cache import Cache

logger = logging.getLogger(__name__)

RealFunction: TypeAlias = Callable[[Decimal], Decimal]

_CYCLE_LENGTH = 2


@final
@dataclass(frozen=True, slots=True)
class NewtonRaphsonProvider:
    """Solver configuration: ``f``, ``f_prime`` and optional clamping.

    Clamping rules:
      - ``minimum``, ``maximum`` and ``clamping`` all set: ``clamping`` is
        used (e.g. periodic wraparound).
      - only ``minimum`` and ``maximum`` set: interval clamping.
      - otherwise no clamping.
    """

    f: RealFunction
    f_prime: RealFunction
    clamping: RealFunction | None = None
    minimum: Decimal | None = None
    maximum: Decimal | None = None

    def solve(self, start: Decimal, context: Context) -> Decimal:
        """Iterate ``x <- clamp(x - f(x)/f'(x))`` from ``start`` under ``context``."""
        result = start
        cache = Cache(_CYCLE_LENGTH, start)
        iterations = 0
        while True:
            iterations += 1
            step = context.divide(self.f(result), self.f_prime(result))
            guess = self._clamp(context.subtract(result, step))
            if guess == result:
                logger.debug("newton converged after %d iterations", iterations)
                break
            if cache.contains(guess):
                logger.debug("newton cycle detected after %d iterations", iterations)
                break
            cache.update(guess)
            result = guess
        return self._clamp(result)

    def _clamp(self, value: Decimal) -> Decimal:
        if self.minimum is None or self.maximum is None:
            return value
        if self.clamping is not None:
            return self.clamping(value)
        return clamp(value, self.minimum, self.maximum)

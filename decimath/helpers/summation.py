"""Finite and convergent series summation over a term function.

Summation wraps a term function ``index -> Decimal`` and adds its values
under a caller-supplied context. ``sum_infinite`` halts when adding the next
term no longer changes the rounded partial sum (convergence-by-equality).

A divergent or non-settling term function never halts, and neither does a
convergent one under a directed rounding context (ROUND_UP, ROUND_CEILING):
each positive term then moves the sum by one unit in the last place. The
elementary functions always sum under ROUND_HALF_EVEN (see
``decimath.core.context.working_context``).
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from decimal import Context, Decimal
from typing import TypeAlias, final

from decimath.core.numbers import ZERO

logger = logging.getLogger(__name__)

TermFunction: TypeAlias = Callable[[Decimal], Decimal]


@final
class Summation:
    """Sum of ``term(i)`` over consecutive integer indices.

    Indices are passed to the term function as integral Decimals. The term
    function is called exactly once per index, in increasing order, so it may
    close over stateful suppliers (see FactorialSupplier). Such a function is
    single-pass: reuse needs a fresh supplier.
    """

    __slots__ = ("_term",)

    def __init__(self, term: TermFunction) -> None:
        self._term = term

    def sum(self, start: int, end: int, context: Context) -> Decimal:
        """Sum of ``term(i)`` for ``i`` in ``[start, end]``; ZERO if ``end < start``."""
        result = ZERO
        for i in range(start, end + 1):
            result = context.add(result, self._term(Decimal(i)))
        return result

    def sum_infinite(self, start: int, context: Context) -> Decimal:
        """Sum from ``start`` upward until the rounded partial sum stops changing.

        ``start`` may be negative.
        """
        result = ZERO
        i = start
        while True:
            updated = context.add(result, self._term(Decimal(i)))
            if updated == result:
                logger.debug("series settled after %d terms (prec=%d)", i - start + 1, context.prec)
                return result
            result = updated
            i += 1

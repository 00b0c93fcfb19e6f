"""Stateful incremental number sequences used inside series terms.

NumberSupplier is the structural interface; FactorialSupplier is the
factorial variant. ``next_pre`` returns the current value and then advances;
``next_post`` advances and then returns the new value.
"""

from __future__ import annotations

from decimal import Context, Decimal
from typing import Protocol, final, runtime_checkable

from decimath.core.errors import PreconditionError
from decimath.core.numbers import as_decimal, is_integer


@runtime_checkable
class NumberSupplier(Protocol):
    """Incremental sequence generator indexed by ``n``."""

    @property
    def current_value(self) -> Decimal: ...

    @property
    def current_n(self) -> Decimal: ...

    def next_pre(self, steps: int = 1) -> Decimal: ...

    def next_post(self, steps: int = 1) -> Decimal: ...


# ---------------------------------------------------------------------------
# Exact factorial
# ---------------------------------------------------------------------------


def _range_product(low: int, high: int) -> int:
    """Product of the integers in ``[low, high]`` by recursive range splitting."""
    if low > high:
        return 1
    if low == high:
        return low
    if high - low == 1:
        return low * high
    mid = (low + high) // 2
    return _range_product(low, mid) * _range_product(mid + 1, high)


def exact_factorial(n: int) -> int:
    """``n!`` as an exact integer, independent of any precision context.

    Raises
    ------
    PreconditionError
        If n is negative.
    """
    if n < 0:
        raise PreconditionError("exact_factorial", "requires n >= 0", n)
    return _range_product(2, n)


# ---------------------------------------------------------------------------
# FactorialSupplier
# ---------------------------------------------------------------------------


@final
class FactorialSupplier:
    """Supplies ``n!, (n+1)!, ...`` without recomputing from scratch.

    The starting factorial is exact. Each advance multiplies the running value
    by the new ``n`` under the series context.
    """

    __slots__ = ("_n", "_value", "_context")

    def __init__(self, start: Decimal | int, context: Context) -> None:
        if not is_integer(start) or start < 0:
            raise PreconditionError("FactorialSupplier", "start must be a non-negative integer", start)
        self._n = int(start)
        self._context = context
        self._value = Decimal(exact_factorial(self._n))

    @property
    def current_value(self) -> Decimal:
        return self._value

    @property
    def current_n(self) -> Decimal:
        return as_decimal(self._n)

    def _advance(self, steps: int) -> None:
        for _ in range(steps):
            self._n += 1
            self._value = self._context.multiply(self._value, Decimal(self._n))

    def next_pre(self, steps: int = 1) -> Decimal:
        """Return the current factorial, then advance by ``steps``."""
        current = self._value
        self._advance(steps)
        return current

    def next_post(self, steps: int = 1) -> Decimal:
        """Advance by ``steps``, then return the new factorial."""
        self._advance(steps)
        return self._value

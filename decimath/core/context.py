"""Precision contexts for decimath.

A precision context is a ``decimal.Context``: digit precision plus rounding
rule. Every public operation takes one explicitly; nothing reads the
thread-local decimal context and nothing mutates the caller's context.

DECIMATH_DECIMAL_CONTEXT (prec=28, ROUND_HALF_EVEN) is offered as a
convenient default, with traps for InvalidOperation/DivisionByZero/Overflow.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_05UP as _ROUND_05UP
from decimal import ROUND_CEILING as _ROUND_CEILING
from decimal import ROUND_DOWN as _ROUND_DOWN
from decimal import ROUND_FLOOR as _ROUND_FLOOR
from decimal import ROUND_HALF_DOWN as _ROUND_HALF_DOWN
from decimal import ROUND_HALF_EVEN as _ROUND_HALF_EVEN
from decimal import ROUND_HALF_UP as _ROUND_HALF_UP
from decimal import ROUND_UP as _ROUND_UP
from decimal import (
    Context,
    DivisionByZero,
    InvalidOperation,
    Overflow,
)
from typing import final

from decimath.core.errors import PreconditionError

ROUNDING_MODES: frozenset[str] = frozenset({
    _ROUND_05UP,
    _ROUND_CEILING,
    _ROUND_DOWN,
    _ROUND_FLOOR,
    _ROUND_HALF_DOWN,
    _ROUND_HALF_EVEN,
    _ROUND_HALF_UP,
    _ROUND_UP,
})

# ---------------------------------------------------------------------------
# Internal precision: elementary functions compute at +10 guard digits,
# then round back with the caller's context.
# ---------------------------------------------------------------------------

GUARD_DIGITS = 10

_EMIN = -999999
_EMAX = 999999


@final
@dataclass(frozen=True, slots=True)
class Precision:
    """Immutable (digits, rounding) pair. Builds fresh decimal Contexts."""

    digits: int
    rounding: str = _ROUND_HALF_EVEN

    def __post_init__(self) -> None:
        if isinstance(self.digits, bool) or not isinstance(self.digits, int) or self.digits < 1:
            raise PreconditionError("Precision", "digits must be a positive integer", self.digits)
        if self.rounding not in ROUNDING_MODES:
            raise PreconditionError("Precision", f"unknown rounding mode {self.rounding!r}")

    def to_context(self) -> Context:
        """A new trapping Context. Each call returns an independent object."""
        return Context(
            prec=self.digits,
            rounding=self.rounding,
            Emin=_EMIN,
            Emax=_EMAX,
            capitals=1,
            clamp=0,
            flags=[],
            traps=[InvalidOperation, DivisionByZero, Overflow],
        )


def make_context(digits: int, rounding: str = _ROUND_HALF_EVEN) -> Context:
    """Shorthand for ``Precision(digits, rounding).to_context()``."""
    return Precision(digits, rounding).to_context()


def working_context(context: Context, guard_digits: int = GUARD_DIGITS) -> Context:
    """Private copy of ``context`` widened by ``guard_digits``.

    Traps are inherited; flags raised while working do not leak back into the
    caller's context. Rounding is always ROUND_HALF_EVEN: under a directed
    rule every positive series term moves the partial sum by one unit, so
    convergence-by-equality never settles. The caller's rounding applies
    only to the final ``context.plus``.
    """
    working = context.copy()
    working.prec = context.prec + guard_digits
    working.rounding = _ROUND_HALF_EVEN
    working.clear_flags()
    return working


DECIMATH_DECIMAL_CONTEXT = Precision(28).to_context()

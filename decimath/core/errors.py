"""Error hierarchy for decimath.

Domain and precondition failures are raised immediately where they are
detected and never retried. Arithmetic failures (division by zero, 0/0) are
not wrapped: they surface as the ``decimal`` signals trapped by the caller's
context (``DivisionByZero`` is a ``ZeroDivisionError``).
"""

from __future__ import annotations

from decimal import Decimal
from typing import final


class DecimathError(Exception):
    """Base error. NOT @final -- has subclasses."""

    def __init__(self, function: str, reason: str, *arguments: Decimal | int) -> None:
        self.function = function
        self.reason = reason
        self.arguments = arguments
        super().__init__(self.message)

    @property
    def message(self) -> str:
        rendered = ", ".join(str(a) for a in self.arguments)
        return f"{self.function}({rendered}): {self.reason}"

    def to_dict(self) -> dict[str, object]:
        """Serialize to dict with stable keys."""
        return {
            "error": type(self).__name__,
            "function": self.function,
            "arguments": [str(a) for a in self.arguments],
            "reason": self.reason,
        }


@final
class DomainError(DecimathError, ValueError):
    """The function is mathematically undefined for the given input."""


@final
class PreconditionError(DecimathError, ValueError):
    """An argument has the wrong shape (negative, non-integer, out of range)."""

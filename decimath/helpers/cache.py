"""Fixed-size recency buffer for cycle detection in iterative solvers."""

from __future__ import annotations

from decimal import Decimal
from typing import final

from decimath.core.errors import PreconditionError


@final
class Cache:
    """The last ``size`` values, newest first. Used only for membership tests."""

    __slots__ = ("_entries",)

    def __init__(self, size: int, initial_value: Decimal) -> None:
        if size < 1:
            raise PreconditionError("Cache", "requires size >= 1", size)
        self._entries = [initial_value] * size

    def update(self, value: Decimal) -> None:
        """Insert ``value`` at the front; the oldest entry falls off."""
        self._entries.pop()
        self._entries.insert(0, value)

    def contains(self, value: Decimal) -> bool:
        """True if ``value`` numerically equals any cached entry."""
        return any(entry == value for entry in self._entries)

    def __contains__(self, value: object) -> bool:
        return isinstance(value, Decimal) and self.contains(value)

    def __len__(self) -> int:
        return len(self._entries)

    def snapshot(self) -> tuple[Decimal, ...]:
        """Entries newest first."""
        return tuple(self._entries)

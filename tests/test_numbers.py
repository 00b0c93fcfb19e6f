"""Tests for decimath.core.numbers -- constants and predicates."""

from __future__ import annotations

import sys
from decimal import Decimal

import pytest
from hypothesis import given
from hypothesis import strategies as st

from decimath.core.errors import PreconditionError
from decimath.core.numbers import (
    HALF,
    ONE,
    PLATFORM_INT_MAX,
    TWO,
    ZERO,
    as_decimal,
    clamp,
    in_interval,
    is_even,
    is_integer,
    is_odd,
    require_integer,
    signum,
)


class TestConstants:
    def test_values(self) -> None:
        assert (ZERO, ONE, TWO, HALF) == (Decimal(0), Decimal(1), Decimal(2), Decimal("0.5"))

    def test_platform_int_max(self) -> None:
        assert PLATFORM_INT_MAX == sys.maxsize


class TestAsDecimal:
    def test_int_converts_exactly(self) -> None:
        assert as_decimal(10**40) == Decimal("1E40")

    def test_decimal_passes_through(self) -> None:
        d = Decimal("1.25")
        assert as_decimal(d) is d

    @pytest.mark.parametrize("bad", [1.5, "2", True])
    def test_rejects_other_types(self, bad: object) -> None:
        with pytest.raises(PreconditionError):
            as_decimal(bad)  # type: ignore[arg-type]


class TestIntegerPredicates:
    @pytest.mark.parametrize("value", [Decimal("3"), Decimal("3.000"), Decimal("-4"), Decimal("1E+5"), 7])
    def test_integers(self, value: Decimal | int) -> None:
        assert is_integer(value)

    @pytest.mark.parametrize("value", [Decimal("3.5"), Decimal("-0.001"), Decimal("NaN"), Decimal("Infinity")])
    def test_non_integers(self, value: Decimal) -> None:
        assert not is_integer(value)

    def test_require_integer_returns_int(self) -> None:
        assert require_integer(Decimal("12.00")) == 12

    def test_require_integer_rejects(self) -> None:
        with pytest.raises(PreconditionError, match="must be an integer"):
            require_integer(Decimal("1.5"), "power")

    @given(st.integers(min_value=-10**6, max_value=10**6))
    def test_parity_matches_int(self, n: int) -> None:
        assert is_even(Decimal(n)) == (n % 2 == 0)
        assert is_odd(Decimal(n)) == (n % 2 == 1)

    def test_parity_of_non_integer_fails(self) -> None:
        with pytest.raises(PreconditionError):
            is_even(Decimal("2.5"))
        with pytest.raises(PreconditionError):
            is_odd(Decimal("2.5"))


class TestSignClamp:
    @pytest.mark.parametrize(("value", "expected"), [
        (Decimal("-3.2"), -1), (Decimal("0"), 0), (Decimal("-0"), 0), (Decimal("1E-30"), 1),
    ])
    def test_signum(self, value: Decimal, expected: int) -> None:
        assert signum(value) == expected

    @pytest.mark.parametrize(("value", "expected"), [
        (Decimal("-5"), Decimal("-1")), (Decimal("0.5"), Decimal("0.5")), (Decimal("9"), Decimal("1")),
    ])
    def test_clamp(self, value: Decimal, expected: Decimal) -> None:
        assert clamp(value, Decimal("-1"), Decimal("1")) == expected


class TestInInterval:
    def test_closed(self) -> None:
        assert in_interval(ONE, ZERO, ONE)
        assert in_interval(ZERO, ZERO, ONE)

    def test_open_bounds(self) -> None:
        assert not in_interval(ONE, ZERO, ONE, high_inclusive=False)
        assert not in_interval(ZERO, ZERO, ONE, low_inclusive=False)
        assert in_interval(HALF, ZERO, ONE, low_inclusive=False, high_inclusive=False)

    def test_outside(self) -> None:
        assert not in_interval(TWO, ZERO, ONE)
        assert not in_interval(-ONE, ZERO, ONE)

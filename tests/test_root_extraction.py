"""Tests for decimath.elementary.root_extraction -- Halley and real-degree roots."""

from __future__ import annotations

from decimal import (
    ROUND_CEILING,
    ROUND_HALF_DOWN,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    ROUND_UP,
    Decimal,
)

import pytest
from hypothesis import given
from hypothesis import strategies as st

from decimath.core.context import ROUNDING_MODES, make_context
from decimath.core.errors import DomainError
from decimath.elementary.exponentiation import power
from decimath.elementary.root_extraction import (
    integer_root_extraction,
    real_root_extraction,
    root_extraction,
)

# sqrt(2) = 1.41421356237309504880168872420969807...
_SQRT2 = Decimal("1.414213562373095048801688724")
# 2^(1/3) = 1.25992104989487316476721060727822835...
_CBRT2 = Decimal("1.259921049894873164767210607")

_CTX = make_context(28)
_CTX40 = make_context(40)


# ---------------------------------------------------------------------------
# integer_root_extraction -- Halley's method
# ---------------------------------------------------------------------------


class TestIntegerRootExtraction:
    def test_perfect_cube(self) -> None:
        assert abs(integer_root_extraction(Decimal(8), 3, _CTX40) - Decimal(2)) <= Decimal("1e-38")

    def test_square_root_of_two(self) -> None:
        result = integer_root_extraction(Decimal(2), 2, _CTX40)
        assert abs(result - _SQRT2) <= Decimal("1e-27")

    def test_degree_one_is_identity(self) -> None:
        assert integer_root_extraction(Decimal("7.25"), 1, _CTX) == Decimal("7.25")

    def test_radicand_below_one(self) -> None:
        result = integer_root_extraction(Decimal("0.0625"), 4, _CTX40)
        assert abs(result - Decimal("0.5")) <= Decimal("1e-35")

    def test_large_radicand(self) -> None:
        result = integer_root_extraction(Decimal("1e60"), 3, _CTX40)
        assert abs(result - Decimal("1e20")) <= Decimal("1e-15")


# ---------------------------------------------------------------------------
# real_root_extraction
# ---------------------------------------------------------------------------


class TestRealRootExtraction:
    def test_matches_power_of_reciprocal(self) -> None:
        result = real_root_extraction(Decimal(2), Decimal("2.5"), _CTX40)
        expected = power(Decimal(2), Decimal("0.4"), _CTX40)
        assert abs(result - expected) <= Decimal("1e-36")


# ---------------------------------------------------------------------------
# root_extraction -- dispatch
# ---------------------------------------------------------------------------


class TestRootExtraction:
    @pytest.mark.parametrize("degree", [1, 2, 3, Decimal("2.5")])
    def test_zero_radicand(self, degree: Decimal | int) -> None:
        assert root_extraction(Decimal(0), degree, _CTX) == Decimal(0)

    @pytest.mark.parametrize(
        ("radicand", "degree", "expected"),
        [
            (Decimal(8), 3, Decimal(2)),
            (Decimal(81), 4, Decimal(3)),
            (Decimal(1024), 10, Decimal(2)),
            (Decimal("0.001"), 3, Decimal("0.1")),
            (Decimal(9), Decimal("2"), Decimal(3)),
        ],
    )
    def test_exact_roots(self, radicand: Decimal, degree: Decimal | int, expected: Decimal) -> None:
        assert root_extraction(radicand, degree, _CTX) == expected

    def test_square_root_of_two(self) -> None:
        result = root_extraction(Decimal(2), 2, _CTX)
        assert abs(result - _SQRT2) <= Decimal("1e-27")

    def test_cube_root_of_two(self) -> None:
        result = root_extraction(Decimal(2), 3, _CTX)
        assert abs(result - _CBRT2) <= Decimal("1e-27")

    def test_negative_radicand_odd_degree(self) -> None:
        assert root_extraction(Decimal(-27), 3, _CTX) == Decimal(-3)

    def test_negative_degree_is_reciprocal(self) -> None:
        assert root_extraction(Decimal(4), -2, _CTX) == Decimal("0.5")

    def test_negative_radicand_negative_odd_degree(self) -> None:
        assert root_extraction(Decimal(-8), -3, _CTX) == Decimal("-0.5")

    def test_real_degree(self) -> None:
        result = root_extraction(Decimal(2), Decimal("2.5"), _CTX)
        expected = power(Decimal(2), Decimal("0.4"), _CTX)
        assert abs(result - expected) <= Decimal("1e-27")

    @pytest.mark.parametrize(
        ("radicand", "degree"),
        [
            (Decimal(-4), 2),
            (Decimal(16), 0),
            (Decimal(0), 0),
            (Decimal(0), -2),
            (Decimal(-2), Decimal("2.5")),
        ],
    )
    def test_undefined_roots(self, radicand: Decimal, degree: Decimal | int) -> None:
        with pytest.raises(DomainError, match="root_extraction"):
            root_extraction(radicand, degree, _CTX)

    def test_result_rounded_to_context(self) -> None:
        result = root_extraction(Decimal(2), 2, make_context(10))
        assert result == Decimal("1.414213562")

    @given(
        st.decimals(min_value=Decimal("0.01"), max_value=Decimal("1000"), places=2),
        st.integers(min_value=2, max_value=7),
    )
    def test_root_inverts_power(self, x: Decimal, n: int) -> None:
        powered = power(x, n, _CTX40)
        result = root_extraction(powered, n, _CTX)
        tolerance = x * Decimal("1e-26")
        assert abs(result - x) <= tolerance, f"root(({x})^{n}, {n}) off by {abs(result - x)}"


# ---------------------------------------------------------------------------
# Rounding modes: every rule terminates and rounds only the final digit
# ---------------------------------------------------------------------------


class TestRoundingModes:
    @pytest.mark.parametrize("rounding", sorted(ROUNDING_MODES))
    def test_square_root_of_two(self, rounding: str) -> None:
        # sqrt(2) = 1.4142135623730950488|01...
        away = {ROUND_UP, ROUND_CEILING}
        expected = Decimal("1.4142135623730950489" if rounding in away else "1.4142135623730950488")
        context = make_context(20, rounding)
        assert root_extraction(Decimal(2), 2, context) == expected
        assert integer_root_extraction(Decimal(2), 2, context) == expected

    @pytest.mark.parametrize("rounding", sorted(ROUNDING_MODES))
    def test_cube_root_of_two(self, rounding: str) -> None:
        # 2^(1/3) = 1.2599210498948731647|67...
        away = {ROUND_UP, ROUND_CEILING, ROUND_HALF_UP, ROUND_HALF_DOWN, ROUND_HALF_EVEN}
        expected = Decimal("1.2599210498948731648" if rounding in away else "1.2599210498948731647")
        context = make_context(20, rounding)
        assert root_extraction(Decimal(2), 3, context) == expected
        assert real_root_extraction(Decimal(2), Decimal(3), context) == expected

"""Tests for the shared numeric validity checks."""

from __future__ import annotations

import math

import pytest

from heatload.calculation.validation import finite_non_negative, is_finite, is_valid_u_value


class TestIsFinite:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(0.0, True), (-12.5, True), (None, False), (math.nan, False), (math.inf, False)],
    )
    def test_is_finite(self, value: float | None, expected: bool) -> None:
        assert is_finite(value) is expected


class TestUValue:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(0.28, True), (0.0, False), (-0.3, False), (None, False), (math.nan, False)],
    )
    def test_is_valid_u_value(self, value: float | None, expected: bool) -> None:
        assert is_valid_u_value(value) is expected


class TestFiniteNonNegative:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(4.5, 4.5), (0.0, 0.0), (-1.0, 0.0), (None, 0.0), (math.inf, 0.0)],
    )
    def test_clamps_unusable_values(self, value: float | None, expected: float) -> None:
        assert finite_non_negative(value) == expected

"""Tests for unit conversions and rounding."""

from __future__ import annotations

import pytest

from weatherhub.units import meters_to_km, ms_to_mph, round_half_away


class TestRoundHalfAway:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(0.5, 1), (1.5, 2), (2.5, 3), (-0.5, -1), (-2.5, -3), (2.49, 2), (-2.49, -2), (0.0, 0)],
    )
    def test_rounding(self, value: float, expected: int) -> None:
        assert round_half_away(value) == expected


class TestConversions:
    def test_ten_ms_is_22_mph(self) -> None:
        assert ms_to_mph(10) == 22

    def test_zero_wind(self) -> None:
        assert ms_to_mph(0) == 0

    def test_mph_rounds_up(self) -> None:
        # 4.7 * 2.237 = 10.51
        assert ms_to_mph(4.7) == 11

    def test_meters_to_km(self) -> None:
        assert meters_to_km(10000) == 10
        assert meters_to_km(2500) == 3
        assert meters_to_km(400) == 0

"""Tests for canonical conditions, glyphs and moon phases."""

from __future__ import annotations

import pytest

from weatherhub import conditions
from weatherhub.conditions import (
    CANONICAL_CONDITIONS,
    TOMORROW_CODES,
    describe_code,
    moon_phase_name,
    to_canonical_condition,
    to_glyph,
)


class TestCodeTable:
    @pytest.mark.parametrize("code", sorted(TOMORROW_CODES))
    def test_every_code_is_canonical(self, code: int) -> None:
        assert to_canonical_condition(code) in CANONICAL_CONDITIONS

    @pytest.mark.parametrize(
        ("code", "expected"),
        [
            (1000, "Clear"),
            (1100, "Clear"),
            (1101, "Cloudy"),
            (2100, "Fog"),
            (4000, "Drizzle"),
            (4201, "Rain"),
            (5001, "Snow"),
            (6000, "Drizzle"),
            (6201, "Rain"),
            (7102, "Snow"),
            (8000, "Thunderstorm"),
        ],
    )
    def test_known_codes(self, code: int, expected: str) -> None:
        assert to_canonical_condition(code) == expected

    @pytest.mark.parametrize("code", [0, 999, 3000, 9999, -1])
    def test_unmapped_code_is_unknown(self, code: int) -> None:
        assert to_canonical_condition(code) == "Unknown"

    def test_none_is_unknown(self) -> None:
        assert to_canonical_condition(None) == "Unknown"

    def test_describe_code(self) -> None:
        assert describe_code(4200) == "Light Rain"
        assert describe_code(1234) == "Unknown"
        assert describe_code(None) == "Unknown"


class TestLabels:
    @pytest.mark.parametrize(
        ("label", "expected"),
        [
            ("Rain", "Rain"),
            ("light rain", "Rain"),
            ("Drizzle", "Drizzle"),
            ("Snow", "Snow"),
            ("Thunderstorm", "Thunderstorm"),
            ("thunder showers", "Thunderstorm"),
            ("Clouds", "Cloudy"),
            ("Clear", "Clear"),
            ("SUNNY", "Clear"),
            ("Mist", "Fog"),
            ("Haze", "Fog"),
            ("Windy", "Windy"),
            ("Squall", "Unknown"),
            ("", "Unknown"),
        ],
    )
    def test_label_mapping(self, label: str, expected: str) -> None:
        assert to_canonical_condition(label) == expected

    def test_rain_wins_over_wind(self) -> None:
        assert to_canonical_condition("rainy and windy") == "Rain"

    def test_snow_wins_over_cloud(self) -> None:
        assert to_canonical_condition("cloudy with snow") == "Snow"

    def test_storm_wins_over_cloud(self) -> None:
        assert to_canonical_condition("storm clouds") == "Thunderstorm"


class TestGlyph:
    @pytest.mark.parametrize(
        "label",
        ["rain", "Light Rain", "THUNDERSTORM WITH RAIN", "freezing rain and snow", "rainy and windy", "Drizzle"],
    )
    def test_rain_glyph(self, label: str) -> None:
        assert to_glyph(label) == conditions.GLYPH_RAIN
        assert to_glyph(label, is_daytime=False) == conditions.GLYPH_RAIN

    def test_clear_day_night(self) -> None:
        assert to_glyph("Clear", is_daytime=True) == conditions.GLYPH_SUN
        assert to_glyph("Clear", is_daytime=False) == conditions.GLYPH_MOON

    def test_cloudy_day_night(self) -> None:
        assert to_glyph("Cloudy", is_daytime=True) == conditions.GLYPH_CLOUD_DAY
        assert to_glyph("Cloudy", is_daytime=False) == conditions.GLYPH_CLOUD_NIGHT

    @pytest.mark.parametrize(
        ("label", "glyph"),
        [
            ("Snow", conditions.GLYPH_SNOW),
            ("Thunderstorm", conditions.GLYPH_STORM),
            ("Fog", conditions.GLYPH_FOG),
            ("Windy", conditions.GLYPH_WIND),
        ],
    )
    def test_stable_across_time_of_day(self, label: str, glyph: str) -> None:
        assert to_glyph(label, is_daytime=True) == glyph
        assert to_glyph(label, is_daytime=False) == glyph

    def test_unknown_uses_time_of_day_default(self) -> None:
        assert to_glyph("Unknown", is_daytime=True) == conditions.GLYPH_SUN
        assert to_glyph("Unknown", is_daytime=False) == conditions.GLYPH_MOON


class TestMoonPhase:
    def test_known(self) -> None:
        assert moon_phase_name(0) == "New Moon"
        assert moon_phase_name(4) == "Full Moon"

    def test_unknown(self) -> None:
        assert moon_phase_name(8) == ""
        assert moon_phase_name(None) == ""

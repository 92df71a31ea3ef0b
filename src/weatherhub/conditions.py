"""Canonical weather conditions, display glyphs and moon phases.

Two kinds of provider input resolve to the same closed vocabulary:

- Tomorrow.io numeric weather codes, through a lookup table.
- Free-text labels (OpenWeatherMap ``weather[0].main``), through
  case-insensitive substring matching in a fixed precedence order.
"""

from __future__ import annotations

CLEAR = "Clear"
CLOUDY = "Cloudy"
RAIN = "Rain"
DRIZZLE = "Drizzle"
SNOW = "Snow"
THUNDERSTORM = "Thunderstorm"
FOG = "Fog"
WINDY = "Windy"
UNKNOWN = "Unknown"

CANONICAL_CONDITIONS = frozenset(
    {CLEAR, CLOUDY, RAIN, DRIZZLE, SNOW, THUNDERSTORM, FOG, WINDY, UNKNOWN}
)

# Tomorrow.io weather codes: (detailed label, canonical condition)
TOMORROW_CODES: dict[int, tuple[str, str]] = {
    1000: ("Clear", CLEAR),
    1100: ("Mostly Clear", CLEAR),
    1101: ("Partly Cloudy", CLOUDY),
    1102: ("Mostly Cloudy", CLOUDY),
    1001: ("Cloudy", CLOUDY),
    2000: ("Fog", FOG),
    2100: ("Light Fog", FOG),
    4000: ("Drizzle", DRIZZLE),
    4001: ("Rain", RAIN),
    4200: ("Light Rain", RAIN),
    4201: ("Heavy Rain", RAIN),
    5000: ("Snow", SNOW),
    5001: ("Flurries", SNOW),
    5100: ("Light Snow", SNOW),
    5101: ("Heavy Snow", SNOW),
    6000: ("Freezing Drizzle", DRIZZLE),
    6001: ("Freezing Rain", RAIN),
    6200: ("Light Freezing Rain", RAIN),
    6201: ("Heavy Freezing Rain", RAIN),
    7000: ("Ice Pellets", SNOW),
    7101: ("Heavy Ice Pellets", SNOW),
    7102: ("Light Ice Pellets", SNOW),
    8000: ("Thunderstorm", THUNDERSTORM),
}

GLYPH_RAIN = "🌧️"
GLYPH_SNOW = "❄️"
GLYPH_STORM = "⛈️"
GLYPH_CLOUD_DAY = "☁️"
GLYPH_CLOUD_NIGHT = "🌥️"
GLYPH_SUN = "☀️"
GLYPH_MOON = "🌙"
GLYPH_FOG = "🌫️"
GLYPH_WIND = "💨"

# First match wins. Each rule: (substrings, canonical, day glyph, night glyph)
_LABEL_RULES: tuple[tuple[tuple[str, ...], str, str, str], ...] = (
    (("rain",), RAIN, GLYPH_RAIN, GLYPH_RAIN),
    (("drizzle",), DRIZZLE, GLYPH_RAIN, GLYPH_RAIN),
    (("snow",), SNOW, GLYPH_SNOW, GLYPH_SNOW),
    (("storm", "thunder"), THUNDERSTORM, GLYPH_STORM, GLYPH_STORM),
    (("cloud",), CLOUDY, GLYPH_CLOUD_DAY, GLYPH_CLOUD_NIGHT),
    (("clear", "sunny"), CLEAR, GLYPH_SUN, GLYPH_MOON),
    (("fog", "mist", "haze", "smoke"), FOG, GLYPH_FOG, GLYPH_FOG),
    (("wind",), WINDY, GLYPH_WIND, GLYPH_WIND),
)

MOON_PHASES: dict[int, str] = {
    0: "New Moon",
    1: "Waxing Crescent",
    2: "First Quarter",
    3: "Waxing Gibbous",
    4: "Full Moon",
    5: "Waning Gibbous",
    6: "Third Quarter",
    7: "Waning Crescent",
}


def _match_label(label: str) -> tuple[str, str, str] | None:
    lowered = label.lower()
    for needles, canonical, day_glyph, night_glyph in _LABEL_RULES:
        if any(needle in lowered for needle in needles):
            return canonical, day_glyph, night_glyph
    return None


def to_canonical_condition(value: int | str | None) -> str:
    """Map a Tomorrow.io code or a free-text label to the canonical vocabulary.

    Unmapped codes and unrecognised labels return ``"Unknown"``.
    """
    if isinstance(value, bool) or value is None:
        return UNKNOWN
    if isinstance(value, int):
        entry = TOMORROW_CODES.get(value)
        return entry[1] if entry else UNKNOWN
    match = _match_label(value)
    return match[0] if match else UNKNOWN


def to_glyph(condition: str, is_daytime: bool = True) -> str:
    """Return the display glyph for a canonical condition or free-text label."""
    match = _match_label(condition)
    if match is None:
        return GLYPH_SUN if is_daytime else GLYPH_MOON
    _, day_glyph, night_glyph = match
    return day_glyph if is_daytime else night_glyph


def describe_code(code: int | None) -> str:
    """Return the provider's detailed label for a Tomorrow.io code."""
    if code is None:
        return UNKNOWN
    entry = TOMORROW_CODES.get(code)
    return entry[0] if entry else UNKNOWN


def moon_phase_name(code: int | None) -> str:
    if code is None:
        return ""
    return MOON_PHASES.get(code, "")

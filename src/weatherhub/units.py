"""Unit conversions into canonical units (Celsius, mph, km, hPa)."""

from __future__ import annotations

import math

MS_TO_MPH = 2.237


def round_half_away(value: float) -> int:
    """Round to the nearest integer, with halves rounded away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def ms_to_mph(ms: float) -> int:
    """Wind speed in m/s to whole mph."""
    return round_half_away(ms * MS_TO_MPH)


def meters_to_km(meters: float) -> int:
    """Distance in meters to whole kilometers."""
    return round_half_away(meters / 1000)

"""Request validation and query parameter building."""

from __future__ import annotations

import math
from typing import Any


def validate_coordinates(lat: float, lon: float) -> None:
    """Raise ValueError unless ``lat``/``lon`` are finite and in range."""
    for name, value, limit in (("latitude", lat, 90.0), ("longitude", lon, 180.0)):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"{name} must be a number, got {value!r}")
        if not math.isfinite(value):
            raise ValueError(f"{name} must be finite, got {value!r}")
        if not -limit <= value <= limit:
            raise ValueError(f"{name} must be within [-{limit:g}, {limit:g}], got {value!r}")


def validate_days(days: int, maximum: int) -> None:
    """Raise ValueError unless ``days`` is an integer in ``1..maximum``."""
    if isinstance(days, bool) or not isinstance(days, int):
        raise ValueError(f"days must be an integer, got {days!r}")
    if not 1 <= days <= maximum:
        raise ValueError(f"days must be between 1 and {maximum}, got {days}")


def build_query_params(**kwargs: Any) -> list[tuple[str, str]]:
    """Build a list of query parameter tuples from keyword arguments.

    ``None`` values are dropped and lists are joined with commas, which is how
    both providers expect multi-valued fields.

    Args:
        **kwargs: Keyword arguments where keys are parameter names.

    Returns:
        List of (key, value) tuples suitable for httpx params.
    """
    params: list[tuple[str, str]] = []
    for key, value in kwargs.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            params.append((key, ",".join(str(v) for v in value)))
        else:
            params.append((key, str(value)))
    return params

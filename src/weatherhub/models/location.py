"""Geocoding result model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Location(BaseModel):
    """A place candidate returned by location search."""

    model_config = ConfigDict(frozen=True)

    name: str
    lat: float
    lon: float
    country: str = ""

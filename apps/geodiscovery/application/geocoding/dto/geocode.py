"""Geocoding DTOs."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GeocodeResult:
    """Forward geocoding result."""

    latitude: float
    longitude: float
    formatted_address: str
    place_id: str | None = None


@dataclass(frozen=True)
class ReverseGeocodeResult:
    """Postal address components for a coordinate."""

    address: str
    city: str
    state: str
    country: str
    postal_code: str

"""Coordinates Value Object."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0
MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0


def _is_finite_number(value: Any) -> bool:
    # bool is an int subclass but never a coordinate
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def is_valid_coordinate(latitude: Any, longitude: Any) -> bool:
    """Return True when both components are finite numbers within range."""
    if not (_is_finite_number(latitude) and _is_finite_number(longitude)):
        return False
    return (
        MIN_LATITUDE <= latitude <= MAX_LATITUDE
        and MIN_LONGITUDE <= longitude <= MAX_LONGITUDE
    )


@dataclass(frozen=True)
class Coordinates:
    """Latitude/longitude pair in decimal degrees."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        """Reject out-of-range values instead of clamping them."""
        if not _is_finite_number(self.latitude) or not (
            MIN_LATITUDE <= self.latitude <= MAX_LATITUDE
        ):
            raise ValueError(f"Invalid latitude: {self.latitude}")
        if not _is_finite_number(self.longitude) or not (
            MIN_LONGITUDE <= self.longitude <= MAX_LONGITUDE
        ):
            raise ValueError(f"Invalid longitude: {self.longitude}")

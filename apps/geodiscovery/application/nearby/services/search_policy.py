"""Search Policy Service.

Boundary validation for coordinate based searches. Runs before any I/O.
"""

from __future__ import annotations

import math

from geodiscovery.application.common.exceptions import (
    InvalidCoordinateError,
    InvalidRadiusError,
)
from geodiscovery.domain.value_objects import Coordinates, is_valid_coordinate

DEFAULT_RADIUS_KM = 50.0
MAX_RADIUS_KM = 500.0


class SearchPolicyService:
    """Coordinate and radius rules."""

    @staticmethod
    def validate_coordinates(latitude: object, longitude: object) -> Coordinates:
        if not is_valid_coordinate(latitude, longitude):
            raise InvalidCoordinateError()
        return Coordinates(latitude=float(latitude), longitude=float(longitude))

    @staticmethod
    def resolve_radius(
        radius_km: float | None,
        default_km: float = DEFAULT_RADIUS_KM,
        max_km: float = MAX_RADIUS_KM,
    ) -> float:
        """Return the effective radius, rejecting values outside (0, max_km]."""
        if radius_km is None:
            return default_km
        if isinstance(radius_km, bool) or not isinstance(radius_km, (int, float)):
            raise InvalidRadiusError(radius_km, max_km)
        if not math.isfinite(radius_km) or radius_km <= 0 or radius_km > max_km:
            raise InvalidRadiusError(radius_km, max_km)
        return float(radius_km)

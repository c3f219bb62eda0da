"""Domain Services."""

from geodiscovery.domain.services.distance import (
    EARTH_RADIUS_KM,
    format_distance,
    haversine_distance_km,
)

__all__ = ["EARTH_RADIUS_KM", "format_distance", "haversine_distance_km"]

"""Great-circle distance on a spherical Earth.

Pure functions, no I/O. The SQL radius query in the persistence adapter uses
the same radius so reported distances agree after rounding.
"""

from __future__ import annotations

import math

EARTH_RADIUS_KM = 6371.0


def haversine_distance_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Distance between two points in kilometres, rounded to 2 decimals."""
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)
    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    # float error can push `a` marginally past 1 for antipodal points
    a = min(1.0, max(0.0, a))
    distance = EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return round(distance, 2)


def format_distance(distance_km: float | None) -> str | None:
    """Human readable distance: metres below 1 km, kilometres otherwise."""
    if distance_km is None:
        return None
    if distance_km < 1:
        return f"{round(distance_km * 1000)}m"
    text = f"{distance_km:.2f}".rstrip("0").rstrip(".")
    return f"{text}km"

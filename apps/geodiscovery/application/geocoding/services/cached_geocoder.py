"""Cached Geocoder Service.

Puts the geocode cache strictly in front of the geocoder port.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from geodiscovery.application.common.exceptions import (
    InvalidArgumentError,
    InvalidCoordinateError,
)
from geodiscovery.application.geocoding.dto import GeocodeResult, ReverseGeocodeResult
from geodiscovery.domain.value_objects import is_valid_coordinate

if TYPE_CHECKING:
    from geodiscovery.application.geocoding.ports import GeocodeCachePort, GeocoderPort

logger = logging.getLogger(__name__)


def normalize_cache_key(query: str) -> str:
    """Trim and lowercase a free-text query."""
    return query.strip().lower()


class CachedGeocoder:
    """Geocoder with memoized forward lookups.

    Only successful forward lookups are cached; failures propagate unchanged
    so the next call retries the collaborator. Reverse lookups are not cached.
    """

    def __init__(self, geocoder: "GeocoderPort", cache: "GeocodeCachePort") -> None:
        self._geocoder = geocoder
        self._cache = cache

    async def geocode_address(self, address: str) -> GeocodeResult:
        if not isinstance(address, str) or not address.strip():
            raise InvalidArgumentError("Address is required")

        key = normalize_cache_key(address)
        cached = await self._cache.get(key)
        if cached is not None:
            logger.debug("Geocode cache hit", extra={"key": key})
            return cached

        result = await self._geocoder.geocode(address.strip())
        await self._cache.put(key, result)
        logger.info(
            "Geocoded address",
            extra={"key": key, "lat": result.latitude, "lon": result.longitude},
        )
        return result

    async def reverse_geocode(self, latitude: float, longitude: float) -> ReverseGeocodeResult:
        if not is_valid_coordinate(latitude, longitude):
            raise InvalidCoordinateError()
        return await self._geocoder.reverse_geocode(latitude, longitude)

    async def clear_cache(self) -> None:
        await self._cache.clear()

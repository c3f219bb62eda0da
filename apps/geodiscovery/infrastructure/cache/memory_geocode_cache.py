"""In-process geocode cache.

Bounded by entry count and TTL so a long-running process does not grow
without limit.
"""

from __future__ import annotations

import asyncio
import logging

from cachetools import TTLCache

from geodiscovery.application.geocoding.dto import GeocodeResult
from geodiscovery.application.geocoding.ports import GeocodeCachePort

logger = logging.getLogger(__name__)

DEFAULT_MAX_SIZE = 10_000
DEFAULT_TTL_SECONDS = 60 * 60 * 24


class MemoryGeocodeCache(GeocodeCachePort):
    """TTL + LRU-evicting geocode cache shared by every request of the process."""

    def __init__(
        self,
        max_size: int = DEFAULT_MAX_SIZE,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
    ) -> None:
        self._cache: TTLCache[str, GeocodeResult] = TTLCache(maxsize=max_size, ttl=ttl_seconds)
        self._lock = asyncio.Lock()

    async def get(self, key: str) -> GeocodeResult | None:
        async with self._lock:
            return self._cache.get(key)

    async def put(self, key: str, value: GeocodeResult) -> None:
        async with self._lock:
            self._cache[key] = value

    async def clear(self) -> None:
        async with self._lock:
            self._cache.clear()
        logger.info("Geocode cache cleared")

    def __len__(self) -> int:
        return len(self._cache)

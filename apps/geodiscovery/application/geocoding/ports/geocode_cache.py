"""Geocode Cache Port."""

from __future__ import annotations

from abc import ABC, abstractmethod

from geodiscovery.application.geocoding.dto import GeocodeResult


class GeocodeCachePort(ABC):
    """Cache of forward geocoding results keyed by normalized query."""

    @abstractmethod
    async def get(self, key: str) -> GeocodeResult | None:
        """Return the cached entry, or None on a miss."""
        ...

    @abstractmethod
    async def put(self, key: str, value: GeocodeResult) -> None:
        """Store an entry."""
        ...

    @abstractmethod
    async def clear(self) -> None:
        """Drop every entry."""
        ...

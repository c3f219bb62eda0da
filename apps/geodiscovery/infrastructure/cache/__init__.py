"""Cache adapters."""

from geodiscovery.infrastructure.cache.memory_geocode_cache import MemoryGeocodeCache

__all__ = ["MemoryGeocodeCache"]

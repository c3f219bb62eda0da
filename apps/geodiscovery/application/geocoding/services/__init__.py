"""Geocoding Services."""

from geodiscovery.application.geocoding.services.cached_geocoder import (
    CachedGeocoder,
    normalize_cache_key,
)

__all__ = ["CachedGeocoder", "normalize_cache_key"]

"""Geocoding Application Layer."""

from geodiscovery.application.geocoding.commands import GeocodeBatchCommand
from geodiscovery.application.geocoding.dto import (
    BatchGeocodeEntry,
    BatchGeocodeResult,
    GeocodeResult,
    ReverseGeocodeResult,
)
from geodiscovery.application.geocoding.ports import GeocodeCachePort, GeocoderPort
from geodiscovery.application.geocoding.services import CachedGeocoder, normalize_cache_key

__all__ = [
    "BatchGeocodeEntry",
    "BatchGeocodeResult",
    "CachedGeocoder",
    "GeocodeBatchCommand",
    "GeocodeCachePort",
    "GeocodeResult",
    "GeocoderPort",
    "ReverseGeocodeResult",
    "normalize_cache_key",
]

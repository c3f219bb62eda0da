"""Geocoding Ports."""

from geodiscovery.application.geocoding.ports.geocode_cache import GeocodeCachePort
from geodiscovery.application.geocoding.ports.geocoder import GeocoderPort

__all__ = ["GeocodeCachePort", "GeocoderPort"]

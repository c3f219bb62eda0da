"""Geocoding DTOs."""

from geodiscovery.application.geocoding.dto.batch import BatchGeocodeEntry, BatchGeocodeResult
from geodiscovery.application.geocoding.dto.geocode import GeocodeResult, ReverseGeocodeResult

__all__ = ["BatchGeocodeEntry", "BatchGeocodeResult", "GeocodeResult", "ReverseGeocodeResult"]

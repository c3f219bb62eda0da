"""Geocoding Commands."""

from geodiscovery.application.geocoding.commands.geocode_batch import GeocodeBatchCommand

__all__ = ["GeocodeBatchCommand"]

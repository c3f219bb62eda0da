"""Nominatim integration."""

from geodiscovery.infrastructure.integrations.nominatim.nominatim_client import NominatimGeocoder

__all__ = ["NominatimGeocoder"]

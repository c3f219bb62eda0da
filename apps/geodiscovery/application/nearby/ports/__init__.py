"""Nearby Ports."""

from geodiscovery.application.nearby.ports.location_reader import LocationReader
from geodiscovery.application.nearby.ports.location_writer import LocationWriter

__all__ = ["LocationReader", "LocationWriter"]

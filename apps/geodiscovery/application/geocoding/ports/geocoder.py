"""Geocoder Port.

Forward and reverse geocoding against an external lookup service.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from geodiscovery.application.geocoding.dto import GeocodeResult, ReverseGeocodeResult


class GeocoderPort(ABC):
    """Geocoding collaborator port.

    Implementations raise ``GeocodeNotFoundError`` when there is no match and
    ``ServiceUnavailableError`` on transport failure or timeout.
    """

    @abstractmethod
    async def geocode(self, query: str) -> GeocodeResult:
        """Resolve free text to coordinates."""
        ...

    @abstractmethod
    async def reverse_geocode(self, latitude: float, longitude: float) -> ReverseGeocodeResult:
        """Resolve coordinates to postal address components."""
        ...

    async def close(self) -> None:
        """Release resources (optional)."""
        pass

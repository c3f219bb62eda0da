"""Nominatim (OpenStreetMap) HTTP geocoder.

- Forward search: GET /search?format=json&q=...&limit=1
- Reverse:        GET /reverse?format=json&lat=...&lon=...&addressdetails=1
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx

from geodiscovery.application.common.exceptions import (
    GeocodeNotFoundError,
    ServiceUnavailableError,
)
from geodiscovery.application.geocoding.dto import GeocodeResult, ReverseGeocodeResult
from geodiscovery.application.geocoding.ports import GeocoderPort

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0
DEFAULT_COUNTRY = "India"


class NominatimGeocoder(GeocoderPort):
    """Nominatim HTTP client."""

    BASE_URL = "https://nominatim.openstreetmap.org"

    def __init__(
        self,
        base_url: str = BASE_URL,
        user_agent: str = "farm-marketplace-geodiscovery/1.0",
        timeout: float = DEFAULT_TIMEOUT,
        country_codes: str | None = "in",
    ) -> None:
        self._base_url = base_url
        self._user_agent = user_agent
        self._timeout = timeout
        self._country_codes = country_codes
        self._client: httpx.AsyncClient | None = None
        self._lock = asyncio.Lock()

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            async with self._lock:
                if self._client is None:
                    self._client = httpx.AsyncClient(
                        base_url=self._base_url,
                        headers={"User-Agent": self._user_agent},
                        timeout=self._timeout,
                    )
        return self._client

    async def geocode(self, query: str) -> GeocodeResult:
        params: dict[str, Any] = {"format": "json", "q": query, "limit": 1}
        if self._country_codes:
            params["countrycodes"] = self._country_codes

        data = await self._get_json("/search", params, context={"query": query})
        if not isinstance(data, list) or not data:
            raise GeocodeNotFoundError(query)

        first = data[0]
        try:
            latitude = float(first["lat"])
            longitude = float(first["lon"])
        except (KeyError, TypeError, ValueError):
            logger.warning("Nominatim returned malformed coordinates", extra={"query": query})
            raise GeocodeNotFoundError(query)

        place_id = first.get("place_id")
        return GeocodeResult(
            latitude=latitude,
            longitude=longitude,
            formatted_address=first.get("display_name") or query,
            place_id=str(place_id) if place_id is not None else None,
        )

    async def reverse_geocode(self, latitude: float, longitude: float) -> ReverseGeocodeResult:
        params = {"format": "json", "lat": latitude, "lon": longitude, "addressdetails": 1}
        data = await self._get_json(
            "/reverse", params, context={"lat": latitude, "lon": longitude}
        )
        if not isinstance(data, dict) or not data.get("address"):
            raise GeocodeNotFoundError(f"{latitude},{longitude}")

        address = data["address"]
        return ReverseGeocodeResult(
            address=data.get("display_name", ""),
            city=address.get("city") or address.get("town") or address.get("village") or "",
            state=address.get("state") or "",
            country=address.get("country") or DEFAULT_COUNTRY,
            postal_code=address.get("postcode") or "",
        )

    async def _get_json(self, path: str, params: dict[str, Any], context: dict[str, Any]) -> Any:
        client = await self._get_client()
        try:
            response = await client.get(path, params=params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            logger.error(
                "Nominatim HTTP error",
                extra={"status_code": e.response.status_code, "path": path, **context},
            )
            raise ServiceUnavailableError("Geocoding service unavailable") from e
        except httpx.TimeoutException as e:
            logger.error("Nominatim timeout", extra={"path": path, **context})
            raise ServiceUnavailableError("Geocoding service timed out") from e
        except httpx.HTTPError as e:
            logger.error(
                "Nominatim request failed", extra={"path": path, "error": str(e), **context}
            )
            raise ServiceUnavailableError("Geocoding service unavailable") from e
        except ValueError as e:
            logger.error("Nominatim returned invalid JSON", extra={"path": path, **context})
            raise ServiceUnavailableError("Geocoding service returned an invalid response") from e

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

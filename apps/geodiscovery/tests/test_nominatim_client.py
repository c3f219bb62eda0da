"""Nominatim Geocoder tests."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from geodiscovery.application.common.exceptions import (
    GeocodeNotFoundError,
    ServiceUnavailableError,
)
from geodiscovery.infrastructure.integrations.nominatim import NominatimGeocoder

pytestmark = pytest.mark.asyncio


@pytest.fixture
def client() -> NominatimGeocoder:
    return NominatimGeocoder(
        base_url="https://nominatim.test",
        user_agent="geodiscovery-tests",
        timeout=5.0,
        country_codes="in",
    )


def _http_client(payload) -> AsyncMock:
    mock_response = MagicMock()
    mock_response.json.return_value = payload
    mock_response.raise_for_status = MagicMock()

    mock_http_client = AsyncMock()
    mock_http_client.get.return_value = mock_response
    return mock_http_client


class TestGeocode:
    """Forward geocoding."""

    async def test_success(self, client: NominatimGeocoder) -> None:
        """Geocode success."""
        mock_http_client = _http_client(
            [
                {
                    "lat": "28.6315",
                    "lon": "77.2167",
                    "display_name": "Connaught Place, New Delhi, Delhi, India",
                    "place_id": 12345,
                }
            ]
        )

        with patch.object(client, "_get_client", return_value=mock_http_client):
            result = await client.geocode("Connaught Place")

        assert result.latitude == 28.6315
        assert result.longitude == 77.2167
        assert result.formatted_address == "Connaught Place, New Delhi, Delhi, India"
        assert result.place_id == "12345"

        path = mock_http_client.get.call_args.args[0]
        params = mock_http_client.get.call_args.kwargs["params"]
        assert path == "/search"
        assert params == {
            "format": "json",
            "q": "Connaught Place",
            "limit": 1,
            "countrycodes": "in",
        }

    async def test_no_country_bias(self) -> None:
        """countrycodes is omitted when unset."""
        client = NominatimGeocoder(country_codes=None)
        mock_http_client = _http_client([{"lat": "1", "lon": "2", "display_name": "x"}])

        with patch.object(client, "_get_client", return_value=mock_http_client):
            await client.geocode("x")

        assert "countrycodes" not in mock_http_client.get.call_args.kwargs["params"]

    async def test_empty_result(self, client: NominatimGeocoder) -> None:
        """Empty result is not found."""
        with patch.object(client, "_get_client", return_value=_http_client([])):
            with pytest.raises(GeocodeNotFoundError):
                await client.geocode("!!!invalid!!!")

    async def test_malformed_coordinates(self, client: NominatimGeocoder) -> None:
        """Unparseable coordinates are not found."""
        mock_http_client = _http_client([{"lat": "abc", "lon": "77.2"}])
        with patch.object(client, "_get_client", return_value=mock_http_client):
            with pytest.raises(GeocodeNotFoundError):
                await client.geocode("somewhere")

    async def test_http_error(self, client: NominatimGeocoder) -> None:
        """Non-2xx response is unavailable."""
        mock_http_client = AsyncMock()
        mock_response = MagicMock()
        mock_response.status_code = 503
        mock_http_client.get.side_effect = httpx.HTTPStatusError(
            "Service Unavailable",
            request=MagicMock(),
            response=mock_response,
        )

        with patch.object(client, "_get_client", return_value=mock_http_client):
            with pytest.raises(ServiceUnavailableError):
                await client.geocode("Connaught Place")

    async def test_timeout(self, client: NominatimGeocoder) -> None:
        """Timeout is unavailable."""
        mock_http_client = AsyncMock()
        mock_http_client.get.side_effect = httpx.TimeoutException("Timeout")

        with patch.object(client, "_get_client", return_value=mock_http_client):
            with pytest.raises(ServiceUnavailableError) as exc_info:
                await client.geocode("Connaught Place")

        assert "timed out" in exc_info.value.message

    async def test_connection_error(self, client: NominatimGeocoder) -> None:
        """Connection error is unavailable."""
        mock_http_client = AsyncMock()
        mock_http_client.get.side_effect = httpx.ConnectError("refused")

        with patch.object(client, "_get_client", return_value=mock_http_client):
            with pytest.raises(ServiceUnavailableError):
                await client.geocode("Connaught Place")


class TestReverseGeocode:
    """Reverse geocoding."""

    async def test_city_falls_back_to_town(self, client: NominatimGeocoder) -> None:
        """City falls back to town."""
        mock_http_client = _http_client(
            {
                "display_name": "Sonipat, Haryana, 131001, India",
                "address": {
                    "town": "Sonipat",
                    "state": "Haryana",
                    "country": "India",
                    "postcode": "131001",
                },
            }
        )

        with patch.object(client, "_get_client", return_value=mock_http_client):
            result = await client.reverse_geocode(28.99, 77.02)

        assert result.city == "Sonipat"
        assert result.state == "Haryana"
        assert result.postal_code == "131001"
        assert mock_http_client.get.call_args.kwargs["params"]["addressdetails"] == 1

    async def test_defaults(self, client: NominatimGeocoder) -> None:
        """Missing fields default, country to India."""
        mock_http_client = _http_client(
            {"display_name": "Somewhere", "address": {"village": "Rampur"}}
        )

        with patch.object(client, "_get_client", return_value=mock_http_client):
            result = await client.reverse_geocode(26.0, 80.0)

        assert result.city == "Rampur"
        assert result.state == ""
        assert result.country == "India"
        assert result.postal_code == ""

    async def test_no_address(self, client: NominatimGeocoder) -> None:
        """Response without an address is not found."""
        mock_http_client = _http_client({"error": "Unable to geocode"})
        with patch.object(client, "_get_client", return_value=mock_http_client):
            with pytest.raises(GeocodeNotFoundError):
                await client.reverse_geocode(0.0, 0.0)


class TestClientLifecycle:
    """Lazy client creation and close."""

    async def test_client_reused_and_closed(self, client: NominatimGeocoder) -> None:
        """The HTTP client is created once and closed."""
        first = await client._get_client()
        second = await client._get_client()
        assert first is second
        assert first.headers["User-Agent"] == "geodiscovery-tests"

        await client.close()
        assert client._client is None

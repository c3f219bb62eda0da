"""Dependency Injection for FastAPI."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from geodiscovery.application.geocoding import (
    CachedGeocoder,
    GeocodeBatchCommand,
    GeocodeCachePort,
    GeocoderPort,
)
from geodiscovery.application.nearby import (
    FindNearbyByTextQuery,
    GetNearbyProductsQuery,
    GetNearbySellersQuery,
    GetPopularCitiesQuery,
    GetSearchSuggestionsQuery,
    GetSellerProfileQuery,
    LocationReader,
    LocationWriter,
    SearchSellersByLocationQuery,
    UpdateUserLocationCommand,
    ValidateCoordinatesQuery,
)
from geodiscovery.infrastructure.cache import MemoryGeocodeCache
from geodiscovery.infrastructure.integrations.nominatim import NominatimGeocoder
from geodiscovery.infrastructure.persistence_postgres import (
    SqlaLocationReader,
    SqlaLocationWriter,
)
from geodiscovery.setup.config import get_settings
from geodiscovery.setup.database import get_db_session

logger = logging.getLogger(__name__)

_geocoder: GeocoderPort | None = None
_geocode_cache: GeocodeCachePort | None = None


def get_geocoder() -> GeocoderPort:
    """Return the geocoder singleton."""
    global _geocoder  # noqa: PLW0603
    if _geocoder is None:
        settings = get_settings()
        _geocoder = NominatimGeocoder(
            base_url=settings.geocoder_base_url,
            user_agent=settings.geocoder_user_agent,
            timeout=settings.geocoder_timeout_seconds,
            country_codes=settings.geocoder_country_codes,
        )
        logger.info("Nominatim geocoder created")
    return _geocoder


def get_geocode_cache() -> GeocodeCachePort:
    """Return the process-wide geocode cache singleton."""
    global _geocode_cache  # noqa: PLW0603
    if _geocode_cache is None:
        settings = get_settings()
        _geocode_cache = MemoryGeocodeCache(
            max_size=settings.geocode_cache_max_size,
            ttl_seconds=settings.geocode_cache_ttl_seconds,
        )
    return _geocode_cache


async def close_geocoder() -> None:
    """Close the geocoder HTTP client, if one was created."""
    global _geocoder  # noqa: PLW0603
    if _geocoder is not None:
        await _geocoder.close()
        _geocoder = None


async def get_location_reader(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> LocationReader:
    return SqlaLocationReader(session)


async def get_location_writer(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> LocationWriter:
    return SqlaLocationWriter(session)


def get_cached_geocoder() -> CachedGeocoder:
    return CachedGeocoder(geocoder=get_geocoder(), cache=get_geocode_cache())


async def get_nearby_sellers_query(
    reader: Annotated[LocationReader, Depends(get_location_reader)],
) -> GetNearbySellersQuery:
    settings = get_settings()
    return GetNearbySellersQuery(
        reader,
        default_radius_km=settings.default_radius_km,
        max_radius_km=settings.max_radius_km,
    )


async def get_nearby_products_query(
    reader: Annotated[LocationReader, Depends(get_location_reader)],
) -> GetNearbyProductsQuery:
    settings = get_settings()
    return GetNearbyProductsQuery(
        reader,
        default_radius_km=settings.default_radius_km,
        max_radius_km=settings.max_radius_km,
    )


async def get_find_nearby_by_text_query(
    geocoder: Annotated[CachedGeocoder, Depends(get_cached_geocoder)],
    sellers_query: Annotated[GetNearbySellersQuery, Depends(get_nearby_sellers_query)],
    products_query: Annotated[GetNearbyProductsQuery, Depends(get_nearby_products_query)],
) -> FindNearbyByTextQuery:
    settings = get_settings()
    return FindNearbyByTextQuery(
        geocoder=geocoder,
        sellers_query=sellers_query,
        products_query=products_query,
        default_radius_km=settings.default_radius_km,
        max_radius_km=settings.max_radius_km,
    )


async def get_search_sellers_by_location_query(
    reader: Annotated[LocationReader, Depends(get_location_reader)],
) -> SearchSellersByLocationQuery:
    return SearchSellersByLocationQuery(reader)


async def get_popular_cities_query(
    reader: Annotated[LocationReader, Depends(get_location_reader)],
) -> GetPopularCitiesQuery:
    return GetPopularCitiesQuery(reader)


async def get_search_suggestions_query(
    search_query: Annotated[
        SearchSellersByLocationQuery, Depends(get_search_sellers_by_location_query)
    ],
) -> GetSearchSuggestionsQuery:
    return GetSearchSuggestionsQuery(search_query)


async def get_seller_profile_query(
    reader: Annotated[LocationReader, Depends(get_location_reader)],
) -> GetSellerProfileQuery:
    return GetSellerProfileQuery(reader)


def get_validate_coordinates_query() -> ValidateCoordinatesQuery:
    return ValidateCoordinatesQuery()


def get_geocode_batch_command(
    geocoder: Annotated[CachedGeocoder, Depends(get_cached_geocoder)],
) -> GeocodeBatchCommand:
    return GeocodeBatchCommand(geocoder, max_batch_size=get_settings().batch_geocode_max)


async def get_update_user_location_command(
    writer: Annotated[LocationWriter, Depends(get_location_writer)],
) -> UpdateUserLocationCommand:
    return UpdateUserLocationCommand(writer)

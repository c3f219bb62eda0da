"""Nearby Sellers Controller."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from geodiscovery.application.common.exceptions import (
    ApplicationError,
    InvalidArgumentError,
)
from geodiscovery.application.geocoding import CachedGeocoder
from geodiscovery.application.nearby import (
    FindNearbyByTextQuery,
    GetNearbySellersQuery,
    NearbySearchRequest,
    SearchSellersByLocationQuery,
    UpdateUserLocationCommand,
)
from geodiscovery.application.nearby.dto import LocationUpdateRequest
from geodiscovery.application.nearby.dto.location_update import DEFAULT_COUNTRY
from geodiscovery.application.nearby.services import parse_sort_key, sort_results
from geodiscovery.presentation.http.errors import error_response
from geodiscovery.presentation.http.schemas import (
    ErrorResponse,
    GeocodeData,
    LocationProfileData,
    NearbySellersActionRequest,
    NearbySellersResponse,
    ReverseGeocodeData,
    SellerEntry,
    UserLocation,
)
from geodiscovery.setup.config import get_settings
from geodiscovery.setup.dependencies import (
    get_cached_geocoder,
    get_find_nearby_by_text_query,
    get_nearby_sellers_query,
    get_search_sellers_by_location_query,
    get_update_user_location_command,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/nearby-sellers",
    tags=["nearby-sellers"],
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
)

POST_ACTIONS = ("geocode", "reverse_geocode", "update_location")


@router.get(
    "",
    response_model=NearbySellersResponse,
    response_model_exclude_none=True,
    summary="Find sellers near a point or matching a location text",
)
async def nearby_sellers(
    nearby_query: Annotated[GetNearbySellersQuery, Depends(get_nearby_sellers_query)],
    text_query: Annotated[
        SearchSellersByLocationQuery, Depends(get_search_sellers_by_location_query)
    ],
    latitude: float | None = Query(None),
    longitude: float | None = Query(None),
    radius: float | None = Query(None, description="Search radius in km"),
    search: str | None = Query(None, description="Free text matched on city, state or address"),
    city: str | None = Query(None),
    state: str | None = Query(None),
    limit: int = Query(20, ge=1, le=100),
    sort: str | None = Query(None, description="distance, product_count or name"),
) -> NearbySellersResponse:
    """Coordinates take precedence; otherwise the first of search, city, state is used."""
    sort_key = parse_sort_key(sort) if sort else None
    term = search or city or state
    if term and (latitude is None or longitude is None):
        sellers = await text_query.execute(term, limit=limit)
        if sort_key:
            sellers = sort_results(sellers, sort_key)
        return NearbySellersResponse(
            data=[SellerEntry.model_validate(s) for s in sellers],
            total=len(sellers),
            search_term=term,
        )

    sellers = await nearby_query.execute(
        NearbySearchRequest(latitude=latitude, longitude=longitude, radius_km=radius)
    )
    if sort_key:
        sellers = sort_results(sellers, sort_key)

    return NearbySellersResponse(
        data=[SellerEntry.model_validate(s) for s in sellers],
        total=len(sellers),
        user_location=UserLocation(latitude=latitude, longitude=longitude),
        radius=radius if radius is not None else get_settings().default_radius_km,
        unit="km",
    )


@router.get(
    "/by-address",
    response_model=NearbySellersResponse,
    response_model_exclude_none=True,
    summary="Find sellers near a free-text address",
)
async def nearby_sellers_by_address(
    text_query: Annotated[FindNearbyByTextQuery, Depends(get_find_nearby_by_text_query)],
    q: str = Query(..., min_length=1, max_length=200, description="Address or place name"),
    radius: float | None = Query(None, description="Search radius in km"),
    sort: str | None = Query(None, description="distance, product_count or name"),
) -> NearbySellersResponse:
    sort_key = parse_sort_key(sort) if sort else None
    found = await text_query.find_sellers(q, radius_km=radius)
    sellers = sort_results(found.sellers, sort_key) if sort_key else found.sellers

    return NearbySellersResponse(
        data=[SellerEntry.model_validate(s) for s in sellers],
        total=len(sellers),
        location=GeocodeData.model_validate(found.location),
        radius=found.radius_km,
        unit="km",
    )


@router.post("", summary="Geocode, reverse geocode or update a user location")
async def nearby_sellers_actions(
    body: NearbySellersActionRequest,
    geocoder: Annotated[CachedGeocoder, Depends(get_cached_geocoder)],
    update_command: Annotated[
        UpdateUserLocationCommand, Depends(get_update_user_location_command)
    ],
):
    if body.action == "geocode":
        if not body.address:
            raise InvalidArgumentError("Address is required")
        try:
            result = await geocoder.geocode_address(body.address)
        except ApplicationError as e:
            return _geocode_failure("Failed to geocode address", e)
        return {"success": True, "data": GeocodeData.model_validate(result)}

    if body.action == "reverse_geocode":
        try:
            result = await geocoder.reverse_geocode(body.latitude, body.longitude)
        except InvalidArgumentError:
            raise
        except ApplicationError as e:
            return _geocode_failure("Failed to reverse geocode coordinates", e)
        return {"success": True, "data": ReverseGeocodeData.model_validate(result)}

    if body.action == "update_location":
        location = await update_command.execute(
            LocationUpdateRequest(
                user_id=body.user_id,
                latitude=body.latitude,
                longitude=body.longitude,
                address=body.address,
                city=body.city,
                state=body.state,
                country=body.country or DEFAULT_COUNTRY,
                postal_code=body.postal_code,
            )
        )
        return {
            "success": True,
            "message": "Location updated successfully",
            "data": LocationProfileData(
                latitude=location.coordinates.latitude if location.coordinates else None,
                longitude=location.coordinates.longitude if location.coordinates else None,
                address=location.address,
                city=location.city,
                state=location.state,
                country=location.country,
                postal_code=location.postal_code,
                updated_at=location.updated_at,
            ),
        }

    raise InvalidArgumentError(f"Invalid action. Use: {', '.join(POST_ACTIONS)}")


def _geocode_failure(error: str, exc: ApplicationError) -> JSONResponse:
    logger.warning(error, extra={"reason": exc.message})
    return error_response(400, error, exc.message)

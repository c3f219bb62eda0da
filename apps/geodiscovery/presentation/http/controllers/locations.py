"""Locations Controller.

Popular cities, search suggestions, batch geocoding and coordinate checks.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from geodiscovery.application.common.exceptions import InvalidArgumentError
from geodiscovery.application.geocoding import GeocodeBatchCommand
from geodiscovery.application.nearby import (
    GetPopularCitiesQuery,
    GetSearchSuggestionsQuery,
    ValidateCoordinatesQuery,
)
from geodiscovery.presentation.http.schemas import (
    ErrorResponse,
    BatchGeocodeData,
    CoordinateReport,
    LocationsActionRequest,
    PopularCitiesResponse,
    PopularCity,
    SellerEntry,
    SuggestionsData,
    SuggestionsResponse,
)
from geodiscovery.setup.dependencies import (
    get_geocode_batch_command,
    get_popular_cities_query,
    get_search_suggestions_query,
    get_validate_coordinates_query,
)

router = APIRouter(
    prefix="/locations",
    tags=["locations"],
    responses={400: {"model": ErrorResponse}, 503: {"model": ErrorResponse}},
)

GET_ACTIONS = ("popular_cities", "search_suggestions")
POST_ACTIONS = ("geocode_batch", "validate_coordinates")


@router.get(
    "",
    response_model=PopularCitiesResponse | SuggestionsResponse,
    summary="Popular cities or search suggestions",
)
async def locations(
    cities_query: Annotated[GetPopularCitiesQuery, Depends(get_popular_cities_query)],
    suggestions_query: Annotated[
        GetSearchSuggestionsQuery, Depends(get_search_suggestions_query)
    ],
    action: str | None = Query(None, description=f"One of {', '.join(GET_ACTIONS)}"),
    query: str | None = Query(None, description="Search text for suggestions"),
    limit: int = Query(10, ge=1, le=100),
) -> PopularCitiesResponse | SuggestionsResponse:
    if action == "popular_cities":
        cities = await cities_query.execute(limit=limit)
        return PopularCitiesResponse(
            data=[PopularCity.model_validate(c) for c in cities],
            total=len(cities),
        )

    if action == "search_suggestions":
        suggestions = await suggestions_query.execute(query, limit=limit)
        return SuggestionsResponse(
            data=SuggestionsData(
                sellers=[SellerEntry.model_validate(s) for s in suggestions.sellers],
                location_suggestions=suggestions.location_suggestions,
            ),
            query=suggestions.query,
            total_sellers=len(suggestions.sellers),
        )

    raise InvalidArgumentError(f"Invalid action. Use: {', '.join(GET_ACTIONS)}")


@router.post("", summary="Batch geocode or validate coordinates")
async def location_actions(
    body: LocationsActionRequest,
    batch_command: Annotated[GeocodeBatchCommand, Depends(get_geocode_batch_command)],
    validate_query: Annotated[ValidateCoordinatesQuery, Depends(get_validate_coordinates_query)],
) -> dict:
    if body.action == "geocode_batch":
        result = await batch_command.execute(body.addresses)
        return {"success": True, "data": BatchGeocodeData.model_validate(result)}

    if body.action == "validate_coordinates":
        report = validate_query.execute(body.coordinates)
        return {"success": True, "data": CoordinateReport.model_validate(report)}

    raise InvalidArgumentError(f"Invalid action. Use: {', '.join(POST_ACTIONS)}")

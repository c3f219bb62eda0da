"""Nearby Products Controller."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from geodiscovery.application.nearby import (
    FindNearbyByTextQuery,
    GetNearbyProductsQuery,
    NearbySearchRequest,
    ProductFilters,
)
from geodiscovery.application.nearby.dto import NearbyProductsResult
from geodiscovery.application.nearby.services import SortKey, parse_sort_key, sort_results
from geodiscovery.presentation.http.schemas import (
    ErrorResponse,
    GeocodeData,
    NearbyProductsData,
    NearbyProductsResponse,
    ProductFiltersEcho,
    UserLocation,
)
from geodiscovery.setup.config import get_settings
from geodiscovery.setup.dependencies import (
    get_find_nearby_by_text_query,
    get_nearby_products_query,
)

router = APIRouter(
    prefix="/nearby-products",
    tags=["nearby-products"],
    responses={400: {"model": ErrorResponse}, 503: {"model": ErrorResponse}},
)


@router.get(
    "",
    response_model=NearbyProductsResponse,
    response_model_exclude_none=True,
    summary="Find available products from sellers near a point",
)
async def nearby_products(
    query: Annotated[GetNearbyProductsQuery, Depends(get_nearby_products_query)],
    latitude: float | None = Query(None),
    longitude: float | None = Query(None),
    radius: float | None = Query(None, description="Search radius in km"),
    category: str | None = Query(None, description="Case-insensitive substring"),
    min_price: float | None = Query(None, alias="minPrice", ge=0),
    max_price: float | None = Query(None, alias="maxPrice", ge=0),
    organic: bool | None = Query(None),
    sort: str | None = Query(
        None, description="Order of seller groups: distance, product_count or name"
    ),
) -> NearbyProductsResponse:
    sort_key = parse_sort_key(sort) if sort else None
    filters = ProductFilters(
        category=category,
        min_price=min_price,
        max_price=max_price,
        organic=organic,
    )
    result = await query.execute(
        NearbySearchRequest(
            latitude=latitude,
            longitude=longitude,
            radius_km=radius,
            filters=filters,
        )
    )
    resolved_radius = radius if radius is not None else get_settings().default_radius_km

    return NearbyProductsResponse(
        data=_to_data(result, sort_key),
        filters=_echo_filters(filters, resolved_radius),
        user_location=UserLocation(latitude=latitude, longitude=longitude),
    )


@router.get(
    "/by-address",
    response_model=NearbyProductsResponse,
    response_model_exclude_none=True,
    summary="Find available products near a free-text address",
)
async def nearby_products_by_address(
    text_query: Annotated[FindNearbyByTextQuery, Depends(get_find_nearby_by_text_query)],
    q: str = Query(..., min_length=1, max_length=200, description="Address or place name"),
    radius: float | None = Query(None, description="Search radius in km"),
    category: str | None = Query(None),
    min_price: float | None = Query(None, alias="minPrice", ge=0),
    max_price: float | None = Query(None, alias="maxPrice", ge=0),
    organic: bool | None = Query(None),
    sort: str | None = Query(None),
) -> NearbyProductsResponse:
    sort_key = parse_sort_key(sort) if sort else None
    filters = ProductFilters(
        category=category,
        min_price=min_price,
        max_price=max_price,
        organic=organic,
    )
    found = await text_query.find_products(q, radius_km=radius, filters=filters)

    return NearbyProductsResponse(
        data=_to_data(found.result, sort_key),
        filters=_echo_filters(filters, found.radius_km),
        location=GeocodeData.model_validate(found.location),
    )


def _to_data(result: NearbyProductsResult, sort_key: SortKey | None) -> NearbyProductsData:
    data = NearbyProductsData.model_validate(result)
    if sort_key:
        data.sellers_with_products = sort_results(data.sellers_with_products, sort_key)
    return data


def _echo_filters(filters: ProductFilters, radius: float) -> ProductFiltersEcho:
    return ProductFiltersEcho(
        category=filters.category,
        min_price=filters.min_price,
        max_price=filters.max_price,
        organic=filters.organic,
        radius=radius,
    )

"""Seller Profile Controller."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from geodiscovery.application.nearby import GetSellerProfileQuery
from geodiscovery.presentation.http.schemas import (
    ErrorResponse,
    SellerDetail,
    SellerProduct,
    SellerProfileData,
    SellerProfileResponse,
    SellerStats,
    UserLocation,
)
from geodiscovery.setup.dependencies import get_seller_profile_query

router = APIRouter(
    prefix="/sellers",
    tags=["sellers"],
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
)


@router.get(
    "/{seller_id}",
    response_model=SellerProfileResponse,
    response_model_exclude_none=True,
    summary="Seller profile with available products",
)
async def seller_profile(
    seller_id: str,
    query: Annotated[GetSellerProfileQuery, Depends(get_seller_profile_query)],
    user_latitude: float | None = Query(None, alias="userLatitude"),
    user_longitude: float | None = Query(None, alias="userLongitude"),
) -> SellerProfileResponse:
    """Returns the seller, their available products (newest first) and stats.

    ``distance_km`` is filled only when both user coordinates are given and
    the seller has a stored location.
    """
    profile = await query.execute(
        seller_id,
        user_latitude=user_latitude,
        user_longitude=user_longitude,
    )

    user_location = None
    if user_latitude is not None and user_longitude is not None:
        user_location = UserLocation(latitude=user_latitude, longitude=user_longitude)

    return SellerProfileResponse(
        data=SellerProfileData(
            seller=SellerDetail.model_validate(profile),
            products=[SellerProduct.model_validate(p) for p in profile.products],
            stats=SellerStats.model_validate(profile.stats),
        ),
        user_location=user_location,
    )

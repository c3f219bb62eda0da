"""Nearby Discovery Application Layer."""

from geodiscovery.application.nearby.commands import UpdateUserLocationCommand
from geodiscovery.application.nearby.dto import NearbySearchRequest, ProductFilters
from geodiscovery.application.nearby.ports import LocationReader, LocationWriter
from geodiscovery.application.nearby.queries import (
    FindNearbyByTextQuery,
    GetNearbyProductsQuery,
    GetNearbySellersQuery,
    GetPopularCitiesQuery,
    GetSearchSuggestionsQuery,
    GetSellerProfileQuery,
    SearchSellersByLocationQuery,
    ValidateCoordinatesQuery,
)

__all__ = [
    "FindNearbyByTextQuery",
    "GetNearbyProductsQuery",
    "GetNearbySellersQuery",
    "GetPopularCitiesQuery",
    "GetSearchSuggestionsQuery",
    "GetSellerProfileQuery",
    "LocationReader",
    "LocationWriter",
    "NearbySearchRequest",
    "ProductFilters",
    "SearchSellersByLocationQuery",
    "UpdateUserLocationCommand",
    "ValidateCoordinatesQuery",
]

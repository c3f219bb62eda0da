"""Application Queries."""

from geodiscovery.application.nearby.queries.find_nearby_by_text import (
    FindNearbyByTextQuery,
    NearbyProductsByText,
    NearbySellersByText,
)
from geodiscovery.application.nearby.queries.get_nearby_products import GetNearbyProductsQuery
from geodiscovery.application.nearby.queries.get_nearby_sellers import GetNearbySellersQuery
from geodiscovery.application.nearby.queries.get_popular_cities import GetPopularCitiesQuery
from geodiscovery.application.nearby.queries.get_search_suggestions import (
    GetSearchSuggestionsQuery,
)
from geodiscovery.application.nearby.queries.get_seller_profile import GetSellerProfileQuery
from geodiscovery.application.nearby.queries.search_sellers_by_location import (
    SearchSellersByLocationQuery,
)
from geodiscovery.application.nearby.queries.validate_coordinates import (
    ValidateCoordinatesQuery,
)

__all__ = [
    "FindNearbyByTextQuery",
    "GetNearbyProductsQuery",
    "GetNearbySellersQuery",
    "GetPopularCitiesQuery",
    "GetSearchSuggestionsQuery",
    "GetSellerProfileQuery",
    "NearbyProductsByText",
    "NearbySellersByText",
    "SearchSellersByLocationQuery",
    "ValidateCoordinatesQuery",
]

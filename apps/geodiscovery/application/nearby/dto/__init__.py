"""Application DTOs."""

from geodiscovery.application.nearby.dto.city import PopularCityDTO, SearchSuggestionsDTO
from geodiscovery.application.nearby.dto.coordinate_check import (
    CoordinateCheckDTO,
    CoordinateCheckReport,
)
from geodiscovery.application.nearby.dto.location_update import LocationUpdateRequest
from geodiscovery.application.nearby.dto.nearby_product import (
    GroupedProductDTO,
    NearbyProductDTO,
    NearbyProductsResult,
    SellerGroupDTO,
)
from geodiscovery.application.nearby.dto.nearby_seller import NearbySellerDTO
from geodiscovery.application.nearby.dto.search_request import NearbySearchRequest, ProductFilters
from geodiscovery.application.nearby.dto.seller_profile import (
    SellerProductDTO,
    SellerProfileDTO,
    SellerStatsDTO,
)

__all__ = [
    "CoordinateCheckDTO",
    "CoordinateCheckReport",
    "GroupedProductDTO",
    "LocationUpdateRequest",
    "NearbyProductDTO",
    "NearbyProductsResult",
    "NearbySearchRequest",
    "NearbySellerDTO",
    "PopularCityDTO",
    "ProductFilters",
    "SearchSuggestionsDTO",
    "SellerGroupDTO",
    "SellerProductDTO",
    "SellerProfileDTO",
    "SellerStatsDTO",
]

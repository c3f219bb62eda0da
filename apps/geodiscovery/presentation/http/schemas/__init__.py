"""HTTP Schemas."""

from geodiscovery.presentation.http.schemas.common import ErrorResponse, UserLocation
from geodiscovery.presentation.http.schemas.geocoding import (
    BatchGeocodeData,
    GeocodeData,
    ReverseGeocodeData,
)
from geodiscovery.presentation.http.schemas.nearby import (
    CoordinateReport,
    LocationProfileData,
    NearbyProductsData,
    NearbyProductsResponse,
    NearbySellersResponse,
    PopularCitiesResponse,
    PopularCity,
    ProductFiltersEcho,
    SellerEntry,
    SellerGroup,
    SuggestionsData,
    SuggestionsResponse,
)
from geodiscovery.presentation.http.schemas.requests import (
    LocationsActionRequest,
    NearbySellersActionRequest,
)
from geodiscovery.presentation.http.schemas.seller import (
    SellerDetail,
    SellerProduct,
    SellerProfileData,
    SellerProfileResponse,
    SellerStats,
)

__all__ = [
    "BatchGeocodeData",
    "CoordinateReport",
    "ErrorResponse",
    "GeocodeData",
    "LocationProfileData",
    "LocationsActionRequest",
    "NearbyProductsData",
    "NearbyProductsResponse",
    "NearbySellersActionRequest",
    "NearbySellersResponse",
    "PopularCitiesResponse",
    "PopularCity",
    "ProductFiltersEcho",
    "ReverseGeocodeData",
    "SellerDetail",
    "SellerEntry",
    "SellerGroup",
    "SellerProduct",
    "SellerProfileData",
    "SellerProfileResponse",
    "SellerStats",
    "SuggestionsData",
    "SuggestionsResponse",
    "UserLocation",
]

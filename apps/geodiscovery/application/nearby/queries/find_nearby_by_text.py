"""Find Nearby By Text Query.

Resolves a free-text address through the cached geocoder, then runs the
coordinate search from the resolved point.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from geodiscovery.application.geocoding.dto import GeocodeResult
from geodiscovery.application.nearby.dto import (
    NearbyProductsResult,
    NearbySearchRequest,
    NearbySellerDTO,
    ProductFilters,
)
from geodiscovery.application.nearby.services import SearchPolicyService

if TYPE_CHECKING:
    from geodiscovery.application.geocoding.services import CachedGeocoder
    from geodiscovery.application.nearby.queries.get_nearby_products import (
        GetNearbyProductsQuery,
    )
    from geodiscovery.application.nearby.queries.get_nearby_sellers import (
        GetNearbySellersQuery,
    )

logger = logging.getLogger(__name__)


@dataclass
class NearbySellersByText:
    location: GeocodeResult
    radius_km: float
    sellers: list[NearbySellerDTO]


@dataclass
class NearbyProductsByText:
    location: GeocodeResult
    radius_km: float
    result: NearbyProductsResult


class FindNearbyByTextQuery:
    """Free-text nearby search.

    Geocoder errors propagate unchanged; the caller decides whether to ask
    for a different address.
    """

    def __init__(
        self,
        geocoder: "CachedGeocoder",
        sellers_query: "GetNearbySellersQuery",
        products_query: "GetNearbyProductsQuery",
        default_radius_km: float,
        max_radius_km: float,
    ) -> None:
        self._geocoder = geocoder
        self._sellers_query = sellers_query
        self._products_query = products_query
        self._default_radius_km = default_radius_km
        self._max_radius_km = max_radius_km

    async def find_sellers(
        self, query: str, radius_km: float | None = None
    ) -> NearbySellersByText:
        radius = self._resolve_radius(radius_km)
        location = await self._geocoder.geocode_address(query)
        sellers = await self._sellers_query.execute(
            NearbySearchRequest(
                latitude=location.latitude,
                longitude=location.longitude,
                radius_km=radius,
            )
        )
        return NearbySellersByText(location=location, radius_km=radius, sellers=sellers)

    async def find_products(
        self,
        query: str,
        radius_km: float | None = None,
        filters: ProductFilters | None = None,
    ) -> NearbyProductsByText:
        radius = self._resolve_radius(radius_km)
        location = await self._geocoder.geocode_address(query)
        result = await self._products_query.execute(
            NearbySearchRequest(
                latitude=location.latitude,
                longitude=location.longitude,
                radius_km=radius,
                filters=filters or ProductFilters(),
            )
        )
        return NearbyProductsByText(location=location, radius_km=radius, result=result)

    def _resolve_radius(self, radius_km: float | None) -> float:
        # radius is checked before the geocoder is called
        return SearchPolicyService.resolve_radius(
            radius_km, self._default_radius_km, self._max_radius_km
        )

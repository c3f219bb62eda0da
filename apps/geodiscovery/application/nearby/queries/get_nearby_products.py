"""Get Nearby Products Query."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from geodiscovery.application.nearby.dto import NearbyProductsResult, NearbySearchRequest
from geodiscovery.application.nearby.services import (
    DEFAULT_RADIUS_KM,
    MAX_RADIUS_KM,
    NearbyEntryBuilder,
    ProductFilterService,
    SearchPolicyService,
    SellerGroupingService,
)

if TYPE_CHECKING:
    from geodiscovery.application.nearby.ports import LocationReader

logger = logging.getLogger(__name__)


class GetNearbyProductsQuery:
    """Nearby products Query.

    Workflow:
        1. Validate coordinates and radius (Service)
        2. Radius query (Port)
        3. Category / price / organic post-filters (Service)
        4. Group by seller (Service)
    """

    def __init__(
        self,
        location_reader: "LocationReader",
        default_radius_km: float = DEFAULT_RADIUS_KM,
        max_radius_km: float = MAX_RADIUS_KM,
    ) -> None:
        self._reader = location_reader
        self._default_radius_km = default_radius_km
        self._max_radius_km = max_radius_km

    async def execute(self, request: NearbySearchRequest) -> NearbyProductsResult:
        origin = SearchPolicyService.validate_coordinates(request.latitude, request.longitude)
        radius_km = SearchPolicyService.resolve_radius(
            request.radius_km, self._default_radius_km, self._max_radius_km
        )

        logger.info(
            "Nearby product search started",
            extra={
                "lat": origin.latitude,
                "lon": origin.longitude,
                "radius_km": radius_km,
                "filtered": not request.filters.is_empty(),
            },
        )

        rows = await self._reader.find_products_within_radius(
            latitude=origin.latitude,
            longitude=origin.longitude,
            radius_km=radius_km,
        )
        products = [
            NearbyEntryBuilder.build_product(product, seller, distance_km=distance)
            for product, seller, distance in rows
        ]
        products = ProductFilterService.apply(products, request.filters)
        groups = SellerGroupingService.group_by_seller(products)

        result = NearbyProductsResult(products=products, sellers_with_products=groups)
        logger.info(
            "Nearby product search completed",
            extra={"products": result.total_products, "sellers": result.total_sellers},
        )
        return result

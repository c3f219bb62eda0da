"""Get Nearby Sellers Query.

Conductor for the coordinate based seller search. Talks to infrastructure
through the LocationReader port and delegates pure logic to services.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from geodiscovery.application.nearby.dto import NearbySearchRequest, NearbySellerDTO
from geodiscovery.application.nearby.services import (
    DEFAULT_RADIUS_KM,
    MAX_RADIUS_KM,
    NearbyEntryBuilder,
    SearchPolicyService,
)

if TYPE_CHECKING:
    from geodiscovery.application.nearby.ports import LocationReader

logger = logging.getLogger(__name__)


class GetNearbySellersQuery:
    """Nearby sellers Query.

    Workflow:
        1. Validate coordinates and radius (Service)
        2. Radius query (Port)
        3. DTO mapping (Service)
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

    async def execute(self, request: NearbySearchRequest) -> list[NearbySellerDTO]:
        origin = SearchPolicyService.validate_coordinates(request.latitude, request.longitude)
        radius_km = SearchPolicyService.resolve_radius(
            request.radius_km, self._default_radius_km, self._max_radius_km
        )

        logger.info(
            "Nearby seller search started",
            extra={"lat": origin.latitude, "lon": origin.longitude, "radius_km": radius_km},
        )

        rows = await self._reader.find_sellers_within_radius(
            latitude=origin.latitude,
            longitude=origin.longitude,
            radius_km=radius_km,
        )
        entries = [
            NearbyEntryBuilder.build_seller(seller, distance_km=distance)
            for seller, distance in rows
        ]

        logger.info("Nearby seller search completed", extra={"results_count": len(entries)})
        return entries

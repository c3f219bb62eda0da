"""Search Sellers By Location Query.

Text-only search for when no coordinates are available.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from geodiscovery.application.common.exceptions import InvalidArgumentError
from geodiscovery.application.nearby.dto import NearbySellerDTO
from geodiscovery.application.nearby.services import NearbyEntryBuilder

if TYPE_CHECKING:
    from geodiscovery.application.nearby.ports import LocationReader

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_LIMIT = 20


class SearchSellersByLocationQuery:
    """City/state/address substring search, ordered by name."""

    def __init__(self, location_reader: "LocationReader") -> None:
        self._reader = location_reader

    async def execute(
        self, term: str, limit: int = DEFAULT_SEARCH_LIMIT
    ) -> list[NearbySellerDTO]:
        term = (term or "").strip()
        if not term:
            raise InvalidArgumentError("Search term is required")
        if limit < 1:
            raise InvalidArgumentError("Limit must be a positive integer")

        sellers = await self._reader.search_sellers_by_text(term, limit)
        counts = await self._reader.count_available_products([s.id for s in sellers])

        entries = [
            NearbyEntryBuilder.build_seller(seller, product_count=counts.get(seller.id, 0))
            for seller in sellers
        ]
        logger.info(
            "Location text search completed",
            extra={"term": term, "results_count": len(entries)},
        )
        return entries

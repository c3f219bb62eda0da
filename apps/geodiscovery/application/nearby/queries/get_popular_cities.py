"""Get Popular Cities Query."""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING

from geodiscovery.application.common.exceptions import InvalidArgumentError
from geodiscovery.application.nearby.dto import PopularCityDTO

if TYPE_CHECKING:
    from geodiscovery.application.nearby.ports import LocationReader

DEFAULT_CITY_LIMIT = 10


class GetPopularCitiesQuery:
    """Cities ranked by seller count.

    Ties are broken alphabetically (case-insensitive) so the ranking does not
    depend on repository scan order.
    """

    def __init__(self, location_reader: "LocationReader") -> None:
        self._reader = location_reader

    async def execute(self, limit: int = DEFAULT_CITY_LIMIT) -> list[PopularCityDTO]:
        if limit < 1:
            raise InvalidArgumentError("Limit must be a positive integer")

        cities = await self._reader.list_seller_cities()
        # surrounding whitespace is not part of the city name
        counts = Counter(name for name in ((city or "").strip() for city in cities) if name)
        ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0].casefold(), item[0]))
        return [PopularCityDTO(city=city, seller_count=count) for city, count in ranked[:limit]]

"""Get Search Suggestions Query."""

from __future__ import annotations

from typing import TYPE_CHECKING

from geodiscovery.application.common.exceptions import InvalidArgumentError
from geodiscovery.application.nearby.dto import SearchSuggestionsDTO

if TYPE_CHECKING:
    from geodiscovery.application.nearby.queries.search_sellers_by_location import (
        SearchSellersByLocationQuery,
    )

MIN_QUERY_LENGTH = 2


class GetSearchSuggestionsQuery:
    """Sellers matching a location term plus distinct city/state names."""

    def __init__(self, search_query: "SearchSellersByLocationQuery") -> None:
        self._search = search_query

    async def execute(self, query: str | None, limit: int = 10) -> SearchSuggestionsDTO:
        term = (query or "").strip()
        if len(term) < MIN_QUERY_LENGTH:
            raise InvalidArgumentError(
                f"Query must be at least {MIN_QUERY_LENGTH} characters long"
            )

        sellers = await self._search.execute(term, limit)

        suggestions: list[str] = []
        for seller in sellers:
            for name in (seller.city, seller.state):
                if name and name not in suggestions:
                    suggestions.append(name)

        return SearchSuggestionsDTO(
            query=term,
            sellers=sellers,
            location_suggestions=suggestions[:limit],
        )

"""City aggregate DTOs."""

from __future__ import annotations

from dataclasses import dataclass, field

from geodiscovery.application.nearby.dto.nearby_seller import NearbySellerDTO


@dataclass(frozen=True)
class PopularCityDTO:
    city: str
    seller_count: int


@dataclass
class SearchSuggestionsDTO:
    """Sellers matching a location term plus distinct city/state names."""

    query: str
    sellers: list[NearbySellerDTO] = field(default_factory=list)
    location_suggestions: list[str] = field(default_factory=list)

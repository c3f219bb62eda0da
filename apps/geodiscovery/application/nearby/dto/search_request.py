"""Search Request DTOs."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ProductFilters:
    """Optional post-filters for product search. Unset fields do not filter."""

    category: str | None = None
    min_price: float | None = None
    max_price: float | None = None
    organic: bool | None = None

    def is_empty(self) -> bool:
        return (
            not self.category
            and self.min_price is None
            and self.max_price is None
            and self.organic is None
        )


@dataclass
class NearbySearchRequest:
    """Coordinate based search request."""

    latitude: float
    longitude: float
    radius_km: float | None = None
    filters: ProductFilters = field(default_factory=ProductFilters)

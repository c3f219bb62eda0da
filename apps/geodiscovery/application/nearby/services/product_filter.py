"""Product Filter Service.

Post-filters for nearby products. Filters are ANDed, so the result does not
depend on the order they are applied in.
"""

from __future__ import annotations

from typing import Iterable

from geodiscovery.application.nearby.dto import NearbyProductDTO, ProductFilters


class ProductFilterService:

    @staticmethod
    def apply(
        products: Iterable[NearbyProductDTO],
        filters: ProductFilters | None,
    ) -> list[NearbyProductDTO]:
        if filters is None or filters.is_empty():
            return list(products)
        return [p for p in products if ProductFilterService.matches(p, filters)]

    @staticmethod
    def matches(product: NearbyProductDTO, filters: ProductFilters) -> bool:
        if filters.category:
            category = product.product_category
            if not category or filters.category.lower() not in category.lower():
                return False

        if filters.min_price is not None or filters.max_price is not None:
            price = product.product_price
            if price is None:
                return False
            if filters.min_price is not None and price < filters.min_price:
                return False
            if filters.max_price is not None and price > filters.max_price:
                return False

        if filters.organic is not None and bool(product.organic) != filters.organic:
            return False

        return True

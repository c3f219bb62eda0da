"""Seller Grouping Service."""

from __future__ import annotations

from typing import Iterable

from geodiscovery.application.nearby.dto import (
    GroupedProductDTO,
    NearbyProductDTO,
    SellerGroupDTO,
)


class SellerGroupingService:

    @staticmethod
    def group_by_seller(products: Iterable[NearbyProductDTO]) -> list[SellerGroupDTO]:
        """Group products per seller, keeping first-seen seller order."""
        groups: dict[str, SellerGroupDTO] = {}
        for product in products:
            group = groups.get(product.seller_id)
            if group is None:
                group = SellerGroupDTO(
                    seller_id=product.seller_id,
                    seller_name=product.seller_name,
                    seller_phone=product.seller_phone,
                    seller_whatsapp=product.seller_whatsapp,
                    distance_km=product.distance_km,
                )
                groups[product.seller_id] = group
            group.products.append(
                GroupedProductDTO(
                    id=product.product_id,
                    name=product.product_name,
                    description=product.product_description,
                    price=product.product_price,
                    quantity=product.product_quantity,
                    category=product.product_category,
                    images=list(product.product_images),
                )
            )
        return list(groups.values())

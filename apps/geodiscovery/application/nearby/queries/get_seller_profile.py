"""Get Seller Profile Query.

Seller details with available products, stats and an optional distance from
the caller.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from geodiscovery.application.common.exceptions import InvalidArgumentError
from geodiscovery.application.nearby.dto import (
    SellerProductDTO,
    SellerProfileDTO,
    SellerStatsDTO,
)
from geodiscovery.application.nearby.services import SearchPolicyService
from geodiscovery.domain.entities import Product
from geodiscovery.domain.exceptions import SellerNotFoundError
from geodiscovery.domain.services import haversine_distance_km

if TYPE_CHECKING:
    from geodiscovery.application.nearby.ports import LocationReader

logger = logging.getLogger(__name__)


class GetSellerProfileQuery:
    """Seller profile Query."""

    def __init__(self, location_reader: "LocationReader") -> None:
        self._reader = location_reader

    async def execute(
        self,
        seller_id: str,
        user_latitude: float | None = None,
        user_longitude: float | None = None,
    ) -> SellerProfileDTO:
        """Return the seller profile.

        Args:
            seller_id: seller id
            user_latitude: caller latitude, optional
            user_longitude: caller longitude, optional

        Raises:
            InvalidArgumentError: missing id or only one / invalid user coordinate
            SellerNotFoundError: no seller with that id
        """
        if not seller_id or not seller_id.strip():
            raise InvalidArgumentError("Seller ID is required")

        origin = None
        if user_latitude is not None or user_longitude is not None:
            origin = SearchPolicyService.validate_coordinates(user_latitude, user_longitude)

        seller = await self._reader.find_seller_by_id(seller_id)
        if seller is None:
            raise SellerNotFoundError(seller_id)

        products = list(await self._reader.list_available_products(seller_id))

        distance_km = None
        seller_coordinates = seller.coordinates()
        if origin is not None and seller_coordinates is not None:
            distance_km = haversine_distance_km(
                origin.latitude,
                origin.longitude,
                seller_coordinates.latitude,
                seller_coordinates.longitude,
            )

        location = seller.location
        return SellerProfileDTO(
            id=seller.id,
            name=seller.name,
            email=seller.email,
            phone=seller.phone,
            whatsapp_number=seller.whatsapp_number,
            address=location.address,
            city=location.city,
            state=location.state,
            country=location.country,
            latitude=seller_coordinates.latitude if seller_coordinates else None,
            longitude=seller_coordinates.longitude if seller_coordinates else None,
            distance_km=distance_km,
            created_at=seller.created_at,
            products=[self._to_product_dto(p) for p in products],
            stats=self._build_stats(products),
        )

    @staticmethod
    def _to_product_dto(product: Product) -> SellerProductDTO:
        return SellerProductDTO(
            id=product.id,
            name=product.name,
            description=product.description,
            price=product.price,
            quantity=product.quantity,
            unit=product.unit,
            category=product.category,
            images=list(product.images),
            organic=product.organic,
            available=product.available,
            created_at=product.created_at,
        )

    @staticmethod
    def _build_stats(products: list[Product]) -> SellerStatsDTO:
        categories: list[str] = []
        for product in products:
            if product.category and product.category not in categories:
                categories.append(product.category)
        return SellerStatsDTO(
            total_products=len(products),
            available_products=sum(1 for p in products if p.available),
            categories=categories,
        )

"""Nearby Entry Builder Service.

Maps domain entities to response DTOs. Pure logic with no port dependency.
"""

from __future__ import annotations

from geodiscovery.application.nearby.dto import NearbyProductDTO, NearbySellerDTO
from geodiscovery.domain.entities import Product, Seller
from geodiscovery.domain.services import format_distance


class NearbyEntryBuilder:

    @classmethod
    def build_seller(
        cls,
        seller: Seller,
        distance_km: float | None = None,
        product_count: int | None = None,
    ) -> NearbySellerDTO:
        coordinates = seller.coordinates()
        location = seller.location
        distance = cls._round_distance(distance_km)
        return NearbySellerDTO(
            id=seller.id,
            name=seller.name,
            email=seller.email,
            phone=seller.phone,
            whatsapp_number=seller.whatsapp_number,
            address=cls._sanitize_optional_text(location.address),
            city=cls._sanitize_optional_text(location.city),
            state=cls._sanitize_optional_text(location.state),
            latitude=coordinates.latitude if coordinates else None,
            longitude=coordinates.longitude if coordinates else None,
            distance_km=distance,
            distance_text=format_distance(distance),
            product_count=product_count,
            created_at=seller.created_at,
        )

    @classmethod
    def build_product(
        cls,
        product: Product,
        seller: Seller,
        distance_km: float | None,
    ) -> NearbyProductDTO:
        coordinates = seller.coordinates()
        distance = cls._round_distance(distance_km)
        return NearbyProductDTO(
            product_id=product.id,
            product_name=product.name,
            product_description=product.description,
            product_price=product.price,
            product_quantity=product.quantity,
            product_unit=product.unit,
            product_category=product.category,
            product_images=list(product.images),
            organic=product.organic,
            seller_id=seller.id,
            seller_name=seller.name,
            seller_phone=seller.phone,
            seller_whatsapp=seller.whatsapp_number,
            latitude=coordinates.latitude if coordinates else None,
            longitude=coordinates.longitude if coordinates else None,
            distance_km=distance,
            distance_text=format_distance(distance),
        )

    @staticmethod
    def _round_distance(distance_km: float | None) -> float | None:
        if distance_km is None:
            return None
        return round(float(distance_km), 2)

    @staticmethod
    def _sanitize_optional_text(value: str | None) -> str | None:
        if value is None:
            return None
        normalized = value.strip()
        return normalized or None

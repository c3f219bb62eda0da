"""Nearby Product DTOs."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class NearbyProductDTO:
    """Flat product row with seller attribution."""

    product_id: str
    product_name: str
    product_description: str | None
    product_price: float | None
    product_quantity: float | None
    product_unit: str | None
    product_category: str | None
    product_images: list[str]
    organic: bool
    seller_id: str
    seller_name: str
    seller_phone: str | None
    seller_whatsapp: str | None
    latitude: float | None
    longitude: float | None
    distance_km: float | None
    distance_text: str | None = None


@dataclass
class GroupedProductDTO:
    id: str
    name: str
    description: str | None
    price: float | None
    quantity: float | None
    category: str | None
    images: list[str]


@dataclass
class SellerGroupDTO:
    """All matching products of one seller, sharing the seller's distance."""

    seller_id: str
    seller_name: str
    seller_phone: str | None
    seller_whatsapp: str | None
    distance_km: float | None
    products: list[GroupedProductDTO] = field(default_factory=list)

    @property
    def product_count(self) -> int:
        return len(self.products)


@dataclass
class NearbyProductsResult:
    products: list[NearbyProductDTO] = field(default_factory=list)
    sellers_with_products: list[SellerGroupDTO] = field(default_factory=list)

    @property
    def total_products(self) -> int:
        return len(self.products)

    @property
    def total_sellers(self) -> int:
        return len(self.sellers_with_products)

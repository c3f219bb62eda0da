"""Seller Profile DTOs."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class SellerProductDTO:
    id: str
    name: str
    description: str | None
    price: float | None
    quantity: float | None
    unit: str | None
    category: str | None
    images: list[str]
    organic: bool
    available: bool
    created_at: datetime | None


@dataclass
class SellerStatsDTO:
    total_products: int
    available_products: int
    categories: list[str]


@dataclass
class SellerProfileDTO:
    """Seller details with their available products."""

    id: str
    name: str
    email: str | None
    phone: str | None
    whatsapp_number: str | None
    address: str | None
    city: str | None
    state: str | None
    country: str | None
    latitude: float | None
    longitude: float | None
    distance_km: float | None
    created_at: datetime | None
    products: list[SellerProductDTO] = field(default_factory=list)
    stats: SellerStatsDTO | None = None

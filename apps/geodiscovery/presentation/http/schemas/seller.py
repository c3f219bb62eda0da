"""Seller profile HTTP Schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from geodiscovery.presentation.http.schemas.common import UserLocation


class SellerDetail(BaseModel):
    id: str
    name: str
    email: str | None = None
    phone: str | None = None
    whatsapp_number: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    distance_km: float | None = None
    created_at: datetime | None = None

    model_config = {"from_attributes": True}


class SellerProduct(BaseModel):
    id: str
    name: str
    description: str | None = None
    price: float | None = None
    quantity: float | None = None
    unit: str | None = None
    category: str | None = None
    images: list[str] = Field(default_factory=list)
    organic: bool
    available: bool
    created_at: datetime | None = None

    model_config = {"from_attributes": True}


class SellerStats(BaseModel):
    total_products: int
    available_products: int
    categories: list[str]

    model_config = {"from_attributes": True}


class SellerProfileData(BaseModel):
    seller: SellerDetail
    products: list[SellerProduct]
    stats: SellerStats


class SellerProfileResponse(BaseModel):
    success: bool = True
    data: SellerProfileData
    user_location: UserLocation | None = None

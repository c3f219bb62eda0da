"""Nearby search HTTP Schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from geodiscovery.presentation.http.schemas.common import UserLocation
from geodiscovery.presentation.http.schemas.geocoding import GeocodeData


class SellerEntry(BaseModel):
    """Seller entry schema."""

    id: str
    name: str
    email: str | None = None
    phone: str | None = None
    whatsapp_number: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    distance_km: float | None = None
    distance_text: str | None = None
    product_count: int | None = None
    created_at: datetime | None = None

    model_config = {"from_attributes": True}


class ProductEntry(BaseModel):
    """Flat product row schema."""

    product_id: str
    product_name: str
    product_description: str | None = None
    product_price: float | None = None
    product_quantity: float | None = None
    product_unit: str | None = None
    product_category: str | None = None
    product_images: list[str] = Field(default_factory=list)
    organic: bool
    seller_id: str
    seller_name: str
    seller_phone: str | None = None
    seller_whatsapp: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    distance_km: float | None = None
    distance_text: str | None = None

    model_config = {"from_attributes": True}


class GroupedProduct(BaseModel):
    id: str
    name: str
    description: str | None = None
    price: float | None = None
    quantity: float | None = None
    category: str | None = None
    images: list[str] = Field(default_factory=list)

    model_config = {"from_attributes": True}


class SellerGroup(BaseModel):
    seller_id: str
    seller_name: str
    seller_phone: str | None = None
    seller_whatsapp: str | None = None
    distance_km: float | None = None
    products: list[GroupedProduct]

    model_config = {"from_attributes": True}


class NearbyProductsData(BaseModel):
    products: list[ProductEntry]
    sellers_with_products: list[SellerGroup]
    total_products: int
    total_sellers: int

    model_config = {"from_attributes": True}


class ProductFiltersEcho(BaseModel):
    category: str | None = None
    min_price: float | None = Field(None, alias="minPrice")
    max_price: float | None = Field(None, alias="maxPrice")
    organic: bool | None = None
    radius: float

    model_config = {"populate_by_name": True}


class NearbyProductsResponse(BaseModel):
    success: bool = True
    data: NearbyProductsData
    filters: ProductFiltersEcho
    user_location: UserLocation | None = None
    location: GeocodeData | None = None


class NearbySellersResponse(BaseModel):
    success: bool = True
    data: list[SellerEntry]
    total: int
    user_location: UserLocation | None = None
    location: GeocodeData | None = None
    radius: float | None = None
    unit: str | None = None
    search_term: str | None = None


class PopularCity(BaseModel):
    city: str
    seller_count: int

    model_config = {"from_attributes": True}


class PopularCitiesResponse(BaseModel):
    success: bool = True
    data: list[PopularCity]
    total: int


class SuggestionsData(BaseModel):
    sellers: list[SellerEntry]
    location_suggestions: list[str]

    model_config = {"from_attributes": True}


class SuggestionsResponse(BaseModel):
    success: bool = True
    data: SuggestionsData
    query: str
    total_sellers: int


class CoordinateCheck(BaseModel):
    index: int
    latitude: Any = None
    longitude: Any = None
    valid: bool
    error: str | None = None

    model_config = {"from_attributes": True}


class CoordinateReport(BaseModel):
    results: list[CoordinateCheck]
    valid: int
    invalid: int
    total: int

    model_config = {"from_attributes": True}


class LocationProfileData(BaseModel):
    latitude: float | None = None
    longitude: float | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None
    postal_code: str | None = None
    updated_at: datetime | None = None

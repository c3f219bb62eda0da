"""Geocoding HTTP Schemas."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class GeocodeData(BaseModel):
    latitude: float
    longitude: float
    formatted_address: str
    place_id: str | None = None

    model_config = {"from_attributes": True}


class ReverseGeocodeData(BaseModel):
    address: str
    city: str
    state: str
    country: str
    postal_code: str

    model_config = {"from_attributes": True}


class BatchGeocodeEntry(BaseModel):
    index: int
    address: Any
    success: bool
    data: GeocodeData | None = None
    error: str | None = None

    model_config = {"from_attributes": True}


class BatchGeocodeData(BaseModel):
    results: list[BatchGeocodeEntry]
    successful: int
    failed: int
    total: int

    model_config = {"from_attributes": True}

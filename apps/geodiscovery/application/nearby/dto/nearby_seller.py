"""Nearby Seller DTO."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class NearbySellerDTO:
    """Seller entry for nearby and text search responses.

    ``distance_km`` is only set when the query started from known coordinates
    and the seller has coordinates.
    """

    id: str
    name: str
    email: str | None
    phone: str | None
    whatsapp_number: str | None
    address: str | None
    city: str | None
    state: str | None
    latitude: float | None
    longitude: float | None
    distance_km: float | None = None
    distance_text: str | None = None
    product_count: int | None = None
    created_at: datetime | None = None

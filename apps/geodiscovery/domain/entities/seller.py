"""Seller Entity."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from geodiscovery.domain.value_objects import Coordinates


@dataclass(frozen=True)
class LocationProfile:
    """Location attributes attached to a seller.

    ``coordinates`` is None when geolocation was never captured; such sellers
    are skipped by radius queries but still match text search.
    """

    coordinates: Coordinates | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None
    postal_code: str | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class Seller:
    """A marketplace user with the seller role."""

    id: str
    name: str
    email: str | None = None
    phone: str | None = None
    whatsapp_number: str | None = None
    location: LocationProfile = field(default_factory=LocationProfile)
    created_at: datetime | None = None

    def coordinates(self) -> Coordinates | None:
        return self.location.coordinates

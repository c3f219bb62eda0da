"""Location Update DTO."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

DEFAULT_COUNTRY = "India"


@dataclass
class LocationUpdateRequest:
    """Location data a user explicitly submitted."""

    user_id: str
    latitude: Any
    longitude: Any
    address: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = DEFAULT_COUNTRY
    postal_code: str | None = None

"""Action request bodies."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, Field


class LocationsActionRequest(BaseModel):
    """Body of ``POST /locations``."""

    action: str | None = None
    addresses: list[Any] | None = None
    coordinates: list[Any] | None = None


class NearbySellersActionRequest(BaseModel):
    """Body of ``POST /nearby-sellers``."""

    action: str | None = None
    address: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    user_id: str | None = Field(None, validation_alias=AliasChoices("userId", "user_id"))
    city: str | None = None
    state: str | None = None
    country: str | None = None
    postal_code: str | None = None

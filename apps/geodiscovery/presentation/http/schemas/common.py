"""Shared HTTP schemas."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Error envelope."""

    success: bool = False
    error: str
    details: Any | None = None


class UserLocation(BaseModel):
    latitude: float
    longitude: float

"""Product Entity."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class Product:
    """A listing owned by a seller."""

    id: str
    owner_id: str
    name: str
    description: str | None = None
    price: float | None = None
    quantity: float | None = None
    unit: str | None = None
    category: str | None = None
    images: list[str] = field(default_factory=list)
    organic: bool = False
    available: bool = True
    created_at: datetime | None = None

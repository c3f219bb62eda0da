"""Coordinate validation report DTOs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class CoordinateCheckDTO:
    index: int
    latitude: Any
    longitude: Any
    valid: bool
    error: str | None = None


@dataclass
class CoordinateCheckReport:
    results: list[CoordinateCheckDTO] = field(default_factory=list)

    @property
    def valid(self) -> int:
        return sum(1 for r in self.results if r.valid)

    @property
    def invalid(self) -> int:
        return len(self.results) - self.valid

    @property
    def total(self) -> int:
        return len(self.results)

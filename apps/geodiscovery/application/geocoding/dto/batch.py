"""Batch geocoding DTOs."""

from __future__ import annotations

from dataclasses import dataclass, field

from geodiscovery.application.geocoding.dto.geocode import GeocodeResult


@dataclass
class BatchGeocodeEntry:
    """Outcome for one address of a batch, matched back by ``index``."""

    index: int
    address: str
    success: bool
    data: GeocodeResult | None = None
    error: str | None = None


@dataclass
class BatchGeocodeResult:
    results: list[BatchGeocodeEntry] = field(default_factory=list)

    @property
    def successful(self) -> int:
        return sum(1 for r in self.results if r.success)

    @property
    def failed(self) -> int:
        return sum(1 for r in self.results if not r.success)

    @property
    def total(self) -> int:
        return len(self.results)

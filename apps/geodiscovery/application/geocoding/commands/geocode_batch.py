"""Geocode Batch Command.

Resolves several addresses concurrently with per-item failure isolation.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from geodiscovery.application.common.exceptions import ApplicationError, InvalidArgumentError
from geodiscovery.application.geocoding.dto import BatchGeocodeEntry, BatchGeocodeResult

if TYPE_CHECKING:
    from geodiscovery.application.geocoding.services import CachedGeocoder

logger = logging.getLogger(__name__)

DEFAULT_MAX_BATCH_SIZE = 10


class GeocodeBatchCommand:
    """Batch geocoding Command.

    Workflow:
        1. Reject empty or oversized input before any lookup
        2. Fan out one lookup per address
        3. Join, tagging each entry success/failure by its input index
    """

    def __init__(
        self,
        geocoder: "CachedGeocoder",
        max_batch_size: int = DEFAULT_MAX_BATCH_SIZE,
    ) -> None:
        self._geocoder = geocoder
        self._max_batch_size = max_batch_size

    async def execute(self, addresses: list[str]) -> BatchGeocodeResult:
        if not isinstance(addresses, list) or not addresses:
            raise InvalidArgumentError("Addresses array is required")
        if len(addresses) > self._max_batch_size:
            raise InvalidArgumentError(
                f"Maximum {self._max_batch_size} addresses allowed per batch"
            )

        entries = await asyncio.gather(
            *(self._resolve(index, address) for index, address in enumerate(addresses))
        )
        result = BatchGeocodeResult(results=sorted(entries, key=lambda e: e.index))

        logger.info(
            "Batch geocode completed",
            extra={
                "total": result.total,
                "successful": result.successful,
                "failed": result.failed,
            },
        )
        return result

    async def _resolve(self, index: int, address: str) -> BatchGeocodeEntry:
        try:
            data = await self._geocoder.geocode_address(address)
        except ApplicationError as e:
            return BatchGeocodeEntry(index=index, address=address, success=False, error=e.message)
        return BatchGeocodeEntry(index=index, address=address, success=True, data=data)

"""Update User Location Command."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from geodiscovery.application.common.exceptions import InvalidArgumentError
from geodiscovery.application.nearby.dto import LocationUpdateRequest
from geodiscovery.application.nearby.dto.location_update import DEFAULT_COUNTRY
from geodiscovery.application.nearby.services import SearchPolicyService
from geodiscovery.domain.entities import LocationProfile
from geodiscovery.domain.exceptions import UserNotFoundError

if TYPE_CHECKING:
    from geodiscovery.application.nearby.ports import LocationWriter

logger = logging.getLogger(__name__)


class UpdateUserLocationCommand:
    """Stores a location profile the user explicitly submitted."""

    def __init__(self, location_writer: "LocationWriter") -> None:
        self._writer = location_writer

    async def execute(self, request: LocationUpdateRequest) -> LocationProfile:
        if not request.user_id:
            raise InvalidArgumentError("User ID is required")
        coordinates = SearchPolicyService.validate_coordinates(
            request.latitude, request.longitude
        )

        profile = LocationProfile(
            coordinates=coordinates,
            address=request.address,
            city=request.city,
            state=request.state,
            country=request.country or DEFAULT_COUNTRY,
            postal_code=request.postal_code,
            updated_at=datetime.now(timezone.utc),
        )
        stored = await self._writer.update_user_location(request.user_id, profile)
        if stored is None:
            raise UserNotFoundError(request.user_id)

        logger.info("User location updated", extra={"user_id": request.user_id})
        return stored

"""SQLAlchemy Location Writer Implementation."""

from __future__ import annotations

import logging
import uuid

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from geodiscovery.application.common.exceptions import ServiceUnavailableError
from geodiscovery.application.nearby.ports import LocationWriter
from geodiscovery.domain.entities import LocationProfile
from geodiscovery.infrastructure.persistence_postgres.location_reader_sqla import STORE_ERRORS
from geodiscovery.infrastructure.persistence_postgres.mappers import location_to_domain
from geodiscovery.infrastructure.persistence_postgres.models import UserModel

logger = logging.getLogger(__name__)


class SqlaLocationWriter(LocationWriter):
    """Writes a user's location profile columns."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def update_user_location(
        self, user_id: str, location: LocationProfile
    ) -> LocationProfile | None:
        try:
            uuid.UUID(str(user_id))
        except ValueError:
            return None

        coordinates = location.coordinates
        statement = (
            update(UserModel)
            .where(UserModel.id == user_id)
            .values(
                latitude=coordinates.latitude if coordinates else None,
                longitude=coordinates.longitude if coordinates else None,
                address=location.address,
                city=location.city,
                state=location.state,
                country=location.country,
                postal_code=location.postal_code,
                location_updated_at=location.updated_at,
            )
            .returning(UserModel)
        )
        try:
            result = await self._session.execute(statement)
            user = result.scalar_one_or_none()
            await self._session.commit()
        except STORE_ERRORS as e:
            await self._session.rollback()
            logger.error(
                "Location update failed", extra={"user_id": user_id, "error": str(e)}
            )
            raise ServiceUnavailableError("Location store unavailable") from e

        if user is None:
            return None
        return location_to_domain(user)

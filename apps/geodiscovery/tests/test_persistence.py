"""SQLAlchemy reader/writer tests against a mocked AsyncSession."""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from geodiscovery.application.common.exceptions import ServiceUnavailableError
from geodiscovery.domain.entities import LocationProfile
from geodiscovery.domain.value_objects import Coordinates
from geodiscovery.infrastructure.persistence_postgres import (
    SqlaLocationReader,
    SqlaLocationWriter,
    UserModel,
)

pytestmark = pytest.mark.asyncio

SELLER_ID = "1b4e28ba-2fa1-11d2-883f-0016d3cca427"


def _session(rows=None, scalar=None) -> AsyncMock:
    result = MagicMock()
    result.all.return_value = rows or []
    result.scalar_one_or_none.return_value = scalar
    session = AsyncMock()
    session.execute = AsyncMock(return_value=result)
    return session


def _user() -> UserModel:
    return UserModel(
        id=SELLER_ID,
        name="Green Farm",
        role="seller",
        city="New Delhi",
        latitude=28.7041,
        longitude=77.1025,
    )


class TestSqlaLocationReader:
    """SqlaLocationReader tests."""

    async def test_sellers_within_radius_rounds_distance(self) -> None:
        """Row distances are rounded to two decimals."""
        session = _session(rows=[(_user(), 14.43671)])

        rows = await SqlaLocationReader(session).find_sellers_within_radius(
            latitude=28.6139, longitude=77.2090, radius_km=50
        )

        seller, distance = rows[0]
        assert seller.id == SELLER_ID
        assert distance == 14.44

    async def test_database_error_becomes_service_unavailable(self) -> None:
        """SQLAlchemy errors are reported as unavailable."""
        session = AsyncMock()
        session.execute = AsyncMock(side_effect=OperationalError("SELECT 1", {}, Exception("down")))

        with pytest.raises(ServiceUnavailableError):
            await SqlaLocationReader(session).list_seller_cities()

    async def test_refused_connection_becomes_service_unavailable(self) -> None:
        """A driver-level connection error is reported as unavailable."""
        session = AsyncMock()
        session.execute = AsyncMock(
            side_effect=ConnectionRefusedError(111, "Connect call failed")
        )

        with pytest.raises(ServiceUnavailableError):
            await SqlaLocationReader(session).find_sellers_within_radius(28.6, 77.2, 50)

    async def test_statement_timeout_becomes_service_unavailable(self) -> None:
        """A statement timeout is reported as unavailable."""
        session = AsyncMock()
        session.execute = AsyncMock(side_effect=asyncio.TimeoutError())

        with pytest.raises(ServiceUnavailableError):
            await SqlaLocationReader(session).find_seller_by_id(SELLER_ID)

    async def test_non_uuid_seller_id_is_not_found(self) -> None:
        """Non-UUID ids short-circuit without a query."""
        session = _session()

        reader = SqlaLocationReader(session)

        assert await reader.find_seller_by_id("not-a-uuid") is None
        assert await reader.list_available_products("not-a-uuid") == []
        assert await reader.count_available_products(["not-a-uuid"]) == {}
        session.execute.assert_not_called()

    async def test_count_available_products(self) -> None:
        """Product counts keyed by seller id."""
        session = _session(rows=[(SELLER_ID, 3)])
        counts = await SqlaLocationReader(session).count_available_products([SELLER_ID])
        assert counts == {SELLER_ID: 3}


class TestSqlaLocationWriter:
    """SqlaLocationWriter tests."""

    def _location(self) -> LocationProfile:
        return LocationProfile(
            coordinates=Coordinates(latitude=28.7041, longitude=77.1025),
            city="New Delhi",
            country="India",
        )

    async def test_update_commits(self) -> None:
        """Successful update commits."""
        session = _session(scalar=_user())

        stored = await SqlaLocationWriter(session).update_user_location(
            SELLER_ID, self._location()
        )

        assert stored.city == "New Delhi"
        session.commit.assert_awaited_once()

    async def test_unknown_user(self) -> None:
        """No updated row returns None."""
        session = _session(scalar=None)
        stored = await SqlaLocationWriter(session).update_user_location(
            SELLER_ID, self._location()
        )
        assert stored is None

    async def test_rollback_on_error(self) -> None:
        """Database error rolls back."""
        session = AsyncMock()
        session.execute = AsyncMock(side_effect=OperationalError("UPDATE", {}, Exception("down")))

        with pytest.raises(ServiceUnavailableError):
            await SqlaLocationWriter(session).update_user_location(SELLER_ID, self._location())
        session.rollback.assert_awaited_once()

    async def test_rollback_on_connection_loss(self) -> None:
        """A dropped connection still rolls back and reports unavailable."""
        session = AsyncMock()
        session.execute = AsyncMock(side_effect=ConnectionResetError("connection lost"))

        with pytest.raises(ServiceUnavailableError):
            await SqlaLocationWriter(session).update_user_location(SELLER_ID, self._location())
        session.rollback.assert_awaited_once()

"""SQLAlchemy Location Reader Implementation."""

from __future__ import annotations

import asyncio
import logging
import uuid
from typing import Any, Mapping, Sequence

from sqlalchemy import Select, func, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from geodiscovery.application.common.exceptions import ServiceUnavailableError
from geodiscovery.application.nearby.ports import LocationReader
from geodiscovery.domain.entities import Product, Seller
from geodiscovery.domain.services import EARTH_RADIUS_KM
from geodiscovery.infrastructure.persistence_postgres.mappers import (
    product_to_domain,
    seller_to_domain,
)
from geodiscovery.infrastructure.persistence_postgres.models import ProductModel, UserModel

logger = logging.getLogger(__name__)

SELLER_ROLE = "seller"

# asyncpg connect and command timeouts surface unwrapped
STORE_ERRORS = (SQLAlchemyError, OSError, asyncio.TimeoutError)


def _is_uuid(value: str) -> bool:
    try:
        uuid.UUID(str(value))
    except ValueError:
        return False
    return True


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class SqlaLocationReader(LocationReader):
    """SQLAlchemy based location reader.

    Implements the LocationReader port. Radius membership uses the same
    Haversine formula and Earth radius as the domain distance function.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_sellers_within_radius(
        self,
        latitude: float,
        longitude: float,
        radius_km: float,
    ) -> Sequence[tuple[Seller, float]]:
        distance_expr = self._haversine_expr(latitude, longitude)
        query = (
            select(UserModel, distance_expr)
            .where(
                UserModel.role == SELLER_ROLE,
                UserModel.latitude.is_not(None),
                UserModel.longitude.is_not(None),
                distance_expr <= radius_km,
            )
            .order_by(distance_expr.asc())
        )
        rows = await self._all(query)
        return [
            (seller_to_domain(user), round(float(distance_km), 2))
            for user, distance_km in rows
            if distance_km is not None
        ]

    async def find_products_within_radius(
        self,
        latitude: float,
        longitude: float,
        radius_km: float,
    ) -> Sequence[tuple[Product, Seller, float]]:
        distance_expr = self._haversine_expr(latitude, longitude)
        query = (
            select(ProductModel, UserModel, distance_expr)
            .join(UserModel, ProductModel.owner_id == UserModel.id)
            .where(
                ProductModel.available.is_(True),
                UserModel.role == SELLER_ROLE,
                UserModel.latitude.is_not(None),
                UserModel.longitude.is_not(None),
                distance_expr <= radius_km,
            )
            .order_by(distance_expr.asc(), ProductModel.created_at.desc())
        )
        rows = await self._all(query)
        return [
            (product_to_domain(product), seller_to_domain(user), round(float(distance_km), 2))
            for product, user, distance_km in rows
            if distance_km is not None
        ]

    async def search_sellers_by_text(self, term: str, limit: int) -> Sequence[Seller]:
        pattern = f"%{_escape_like(term)}%"
        query = (
            select(UserModel)
            .where(
                UserModel.role == SELLER_ROLE,
                or_(
                    UserModel.city.ilike(pattern, escape="\\"),
                    UserModel.state.ilike(pattern, escape="\\"),
                    UserModel.address.ilike(pattern, escape="\\"),
                ),
            )
            .order_by(UserModel.name.asc())
            .limit(limit)
        )
        rows = await self._all(query)
        return [seller_to_domain(user) for (user,) in rows]

    async def count_available_products(self, seller_ids: Sequence[str]) -> Mapping[str, int]:
        ids = [i for i in seller_ids if _is_uuid(i)]
        if not ids:
            return {}
        query = (
            select(ProductModel.owner_id, func.count())
            .where(ProductModel.owner_id.in_(ids), ProductModel.available.is_(True))
            .group_by(ProductModel.owner_id)
        )
        rows = await self._all(query)
        return {str(owner_id): int(count) for owner_id, count in rows}

    async def list_seller_cities(self) -> Sequence[str]:
        query = select(UserModel.city).where(
            UserModel.role == SELLER_ROLE,
            UserModel.city.is_not(None),
            UserModel.city != "",
        )
        rows = await self._all(query)
        return [city for (city,) in rows]

    async def find_seller_by_id(self, seller_id: str) -> Seller | None:
        if not _is_uuid(seller_id):
            return None
        query = select(UserModel).where(UserModel.id == seller_id, UserModel.role == SELLER_ROLE)
        try:
            result = await self._session.execute(query)
            user = result.scalar_one_or_none()
        except STORE_ERRORS as e:
            raise self._unavailable(e) from e
        return seller_to_domain(user) if user is not None else None

    async def list_available_products(self, seller_id: str) -> Sequence[Product]:
        if not _is_uuid(seller_id):
            return []
        query = (
            select(ProductModel)
            .where(ProductModel.owner_id == seller_id, ProductModel.available.is_(True))
            .order_by(ProductModel.created_at.desc())
        )
        rows = await self._all(query)
        return [product_to_domain(product) for (product,) in rows]

    async def _all(self, query: Select[Any]) -> Sequence[Any]:
        try:
            result = await self._session.execute(query)
            return result.all()
        except STORE_ERRORS as e:
            raise self._unavailable(e) from e

    @staticmethod
    def _unavailable(error: Exception) -> ServiceUnavailableError:
        logger.error("Location query failed", extra={"error": str(error)})
        return ServiceUnavailableError("Location store unavailable")

    @staticmethod
    def _haversine_expr(latitude: float, longitude: float):
        """Haversine distance (km) from the given point to each user row."""
        d_lat = func.radians(UserModel.latitude - latitude)
        d_lon = func.radians(UserModel.longitude - longitude)
        a = func.power(func.sin(d_lat / 2), 2) + func.cos(func.radians(latitude)) * func.cos(
            func.radians(UserModel.latitude)
        ) * func.power(func.sin(d_lon / 2), 2)
        clamped = func.least(1.0, func.greatest(0.0, a))
        return (2 * EARTH_RADIUS_KM * func.asin(func.sqrt(clamped))).label("distance_km")

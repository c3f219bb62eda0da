"""Location Reader Port."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Mapping, Sequence

from geodiscovery.domain.entities import Product, Seller


class LocationReader(ABC):
    """Read-only access to sellers and products with their locations.

    Implemented in the Infrastructure Layer. Transport failures surface as
    ``ServiceUnavailableError``.
    """

    @abstractmethod
    async def find_sellers_within_radius(
        self,
        latitude: float,
        longitude: float,
        radius_km: float,
    ) -> Sequence[tuple[Seller, float]]:
        """Sellers whose coordinates lie within the radius.

        Args:
            latitude: reference latitude
            longitude: reference longitude
            radius_km: radius (km)

        Returns:
            (Seller, distance_km) tuples, nearest first
        """
        ...

    @abstractmethod
    async def find_products_within_radius(
        self,
        latitude: float,
        longitude: float,
        radius_km: float,
    ) -> Sequence[tuple[Product, Seller, float]]:
        """Available products of sellers within the radius.

        Returns:
            (Product, Seller, seller distance_km) tuples, nearest first
        """
        ...

    @abstractmethod
    async def search_sellers_by_text(self, term: str, limit: int) -> Sequence[Seller]:
        """Sellers whose city, state or address contains ``term``, ordered by name."""
        ...

    @abstractmethod
    async def count_available_products(self, seller_ids: Sequence[str]) -> Mapping[str, int]:
        """Available product count per seller id. Missing ids count zero."""
        ...

    @abstractmethod
    async def list_seller_cities(self) -> Sequence[str]:
        """City of every seller with a non-empty city, in scan order."""
        ...

    @abstractmethod
    async def find_seller_by_id(self, seller_id: str) -> Seller | None:
        ...

    @abstractmethod
    async def list_available_products(self, seller_id: str) -> Sequence[Product]:
        """Available products of a seller, newest first."""
        ...

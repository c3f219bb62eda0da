"""Test doubles and factories shared by the test modules."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Sequence

from geodiscovery.application.common.exceptions import GeocodeNotFoundError
from geodiscovery.application.geocoding import GeocodeResult, GeocoderPort, ReverseGeocodeResult
from geodiscovery.application.nearby import LocationReader
from geodiscovery.domain.entities import LocationProfile, Product, Seller
from geodiscovery.domain.services import haversine_distance_km
from geodiscovery.domain.value_objects import Coordinates

DELHI = (28.6139, 77.2090)
DELHI_NORTH = (28.7041, 77.1025)


def make_seller(
    seller_id: str,
    name: str,
    coordinates: tuple[float, float] | None = DELHI_NORTH,
    city: str | None = "New Delhi",
    state: str | None = "Delhi",
    address: str | None = "12 Market Road",
) -> Seller:
    return Seller(
        id=seller_id,
        name=name,
        email=f"{seller_id}@example.com",
        phone="+91-9800000000",
        whatsapp_number="+91-9800000000",
        location=LocationProfile(
            coordinates=Coordinates(*coordinates) if coordinates else None,
            address=address,
            city=city,
            state=state,
            country="India",
        ),
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )


def make_product(
    product_id: str,
    owner_id: str,
    name: str = "Tomato",
    price: float | None = 20.0,
    category: str | None = "Vegetables",
    organic: bool = False,
    available: bool = True,
) -> Product:
    return Product(
        id=product_id,
        owner_id=owner_id,
        name=name,
        description=f"Fresh {name.lower()}",
        price=price,
        quantity=10.0,
        unit="kg",
        category=category,
        images=[],
        organic=organic,
        available=available,
    )


class FakeLocationReader(LocationReader):
    """In-memory reader computing radius membership with the haversine formula."""

    def __init__(
        self,
        sellers: Sequence[Seller] = (),
        products: Sequence[Product] = (),
    ) -> None:
        self.sellers = list(sellers)
        self.products = list(products)

    def _within(self, latitude: float, longitude: float, radius_km: float):
        for seller in self.sellers:
            coordinates = seller.coordinates()
            if coordinates is None:
                continue
            distance = haversine_distance_km(
                latitude, longitude, coordinates.latitude, coordinates.longitude
            )
            if distance <= radius_km:
                yield seller, distance

    async def find_sellers_within_radius(self, latitude, longitude, radius_km):
        return sorted(self._within(latitude, longitude, radius_km), key=lambda row: row[1])

    async def find_products_within_radius(self, latitude, longitude, radius_km):
        rows = []
        for seller, distance in sorted(
            self._within(latitude, longitude, radius_km), key=lambda row: row[1]
        ):
            for product in self.products:
                if product.owner_id == seller.id and product.available:
                    rows.append((product, seller, distance))
        return rows

    async def search_sellers_by_text(self, term, limit):
        needle = term.lower()
        matches = [
            s
            for s in self.sellers
            if any(
                value and needle in value.lower()
                for value in (s.location.city, s.location.state, s.location.address)
            )
        ]
        return sorted(matches, key=lambda s: s.name)[:limit]

    async def count_available_products(self, seller_ids):
        return {
            seller_id: sum(
                1 for p in self.products if p.owner_id == seller_id and p.available
            )
            for seller_id in seller_ids
        }

    async def list_seller_cities(self):
        return [s.location.city for s in self.sellers]

    async def find_seller_by_id(self, seller_id):
        return next((s for s in self.sellers if s.id == seller_id), None)

    async def list_available_products(self, seller_id):
        return [p for p in self.products if p.owner_id == seller_id and p.available]


class StubGeocoder(GeocoderPort):
    """Geocoder returning fixed results; counts calls."""

    def __init__(self, known: dict[str, tuple[float, float]] | None = None) -> None:
        self.known = known or {}
        self.calls: list[str] = []

    async def geocode(self, query: str) -> GeocodeResult:
        self.calls.append(query)
        for name, (latitude, longitude) in self.known.items():
            if name.lower() == query.lower():
                return GeocodeResult(
                    latitude=latitude,
                    longitude=longitude,
                    formatted_address=f"{name}, India",
                    place_id="1",
                )
        raise GeocodeNotFoundError(query)

    async def reverse_geocode(self, latitude: float, longitude: float) -> ReverseGeocodeResult:
        return ReverseGeocodeResult(
            address="Connaught Place, New Delhi, Delhi, India",
            city="New Delhi",
            state="Delhi",
            country="India",
            postal_code="110001",
        )



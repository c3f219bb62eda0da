"""ORM row to domain entity mapping."""

from __future__ import annotations

from geodiscovery.domain.entities import LocationProfile, Product, Seller
from geodiscovery.domain.value_objects import Coordinates, is_valid_coordinate
from geodiscovery.infrastructure.persistence_postgres.models import ProductModel, UserModel


def location_to_domain(row: UserModel) -> LocationProfile:
    coordinates = None
    # rows with a broken coordinate are treated as never geolocated
    if is_valid_coordinate(row.latitude, row.longitude):
        coordinates = Coordinates(latitude=row.latitude, longitude=row.longitude)
    return LocationProfile(
        coordinates=coordinates,
        address=row.address,
        city=row.city,
        state=row.state,
        country=row.country,
        postal_code=row.postal_code,
        updated_at=row.location_updated_at,
    )


def seller_to_domain(row: UserModel) -> Seller:
    return Seller(
        id=str(row.id),
        name=row.name or "",
        email=row.email,
        phone=row.phone,
        whatsapp_number=row.whatsapp_number,
        location=location_to_domain(row),
        created_at=row.created_at,
    )


def product_to_domain(row: ProductModel) -> Product:
    return Product(
        id=str(row.id),
        owner_id=str(row.owner_id),
        name=row.name,
        description=row.description,
        price=row.price,
        quantity=row.quantity,
        unit=row.unit,
        category=row.category,
        images=list(row.images or []),
        organic=bool(row.organic),
        available=bool(row.available),
        created_at=row.created_at,
    )

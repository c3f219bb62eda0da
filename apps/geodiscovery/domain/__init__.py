"""Geo-discovery Domain Layer."""

from geodiscovery.domain.entities import LocationProfile, Product, Seller
from geodiscovery.domain.value_objects import Coordinates, is_valid_coordinate

__all__ = ["Coordinates", "LocationProfile", "Product", "Seller", "is_valid_coordinate"]

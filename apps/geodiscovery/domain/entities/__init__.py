"""Domain Entities."""

from geodiscovery.domain.entities.product import Product
from geodiscovery.domain.entities.seller import LocationProfile, Seller

__all__ = ["LocationProfile", "Product", "Seller"]

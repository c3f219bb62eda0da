"""Domain exceptions."""

from geodiscovery.domain.exceptions.base import DomainError
from geodiscovery.domain.exceptions.location import SellerNotFoundError, UserNotFoundError

__all__ = [
    "DomainError",
    "SellerNotFoundError",
    "UserNotFoundError",
]

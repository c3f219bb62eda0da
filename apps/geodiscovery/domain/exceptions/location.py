"""Seller/user lookup errors."""

from geodiscovery.domain.exceptions.base import DomainError


class SellerNotFoundError(DomainError):
    """No seller with the requested id."""

    def __init__(self, seller_id: str | None = None) -> None:
        message = "Seller not found" if seller_id is None else f"Seller not found: {seller_id}"
        super().__init__(message)


class UserNotFoundError(DomainError):
    """No user with the requested id."""

    def __init__(self, user_id: str | None = None) -> None:
        message = "User not found" if user_id is None else f"User not found: {user_id}"
        super().__init__(message)

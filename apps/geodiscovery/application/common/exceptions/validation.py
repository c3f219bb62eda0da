"""Validation and collaborator errors."""

from __future__ import annotations

from geodiscovery.application.common.exceptions.base import ApplicationError


class InvalidArgumentError(ApplicationError):
    """Caller supplied a bad argument. Never retried."""


class InvalidCoordinateError(InvalidArgumentError):
    """Latitude or longitude is missing or out of range."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message
            or "Invalid coordinates. Latitude must be between -90 and 90, "
            "longitude between -180 and 180."
        )


class InvalidRadiusError(InvalidArgumentError):
    """Search radius outside (0, max]."""

    def __init__(self, radius_km: float, max_radius_km: float) -> None:
        self.radius_km = radius_km
        self.max_radius_km = max_radius_km
        super().__init__(
            f"Radius must be greater than 0 and at most {max_radius_km:g} kilometers."
        )


class NotFoundError(ApplicationError):
    """A lookup produced no match."""


class GeocodeNotFoundError(NotFoundError):
    """The geocoder had no match for the query."""

    def __init__(self, query: str) -> None:
        self.query = query
        super().__init__(f"Address not found: {query}")


class ServiceUnavailableError(ApplicationError):
    """A collaborator (database, geocoder) could not be reached."""

    def __init__(self, message: str = "Service not available") -> None:
        super().__init__(message)

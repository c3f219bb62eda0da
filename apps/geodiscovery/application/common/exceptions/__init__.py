"""Application Exceptions."""

from geodiscovery.application.common.exceptions.base import ApplicationError
from geodiscovery.application.common.exceptions.validation import (
    GeocodeNotFoundError,
    InvalidArgumentError,
    InvalidCoordinateError,
    InvalidRadiusError,
    NotFoundError,
    ServiceUnavailableError,
)

__all__ = [
    "ApplicationError",
    "GeocodeNotFoundError",
    "InvalidArgumentError",
    "InvalidCoordinateError",
    "InvalidRadiusError",
    "NotFoundError",
    "ServiceUnavailableError",
]

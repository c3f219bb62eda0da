"""HTTP Error Handlers."""

from geodiscovery.presentation.http.errors.handlers import (
    error_response,
    register_exception_handlers,
)

__all__ = ["error_response", "register_exception_handlers"]

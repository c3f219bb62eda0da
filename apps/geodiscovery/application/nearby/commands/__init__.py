"""Application Commands."""

from geodiscovery.application.nearby.commands.update_user_location import (
    UpdateUserLocationCommand,
)

__all__ = ["UpdateUserLocationCommand"]

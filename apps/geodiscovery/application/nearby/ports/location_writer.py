"""Location Writer Port."""

from __future__ import annotations

from abc import ABC, abstractmethod

from geodiscovery.domain.entities import LocationProfile


class LocationWriter(ABC):
    """Persists location data a user explicitly submitted."""

    @abstractmethod
    async def update_user_location(
        self, user_id: str, location: LocationProfile
    ) -> LocationProfile | None:
        """Store the location profile.

        Returns:
            The stored profile, or None when the user does not exist
        """
        ...

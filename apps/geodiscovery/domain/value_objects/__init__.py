"""Domain Value Objects."""

from geodiscovery.domain.value_objects.coordinates import Coordinates, is_valid_coordinate

__all__ = ["Coordinates", "is_valid_coordinate"]

"""Validate Coordinates Query."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from geodiscovery.application.common.exceptions import InvalidArgumentError
from geodiscovery.application.nearby.dto import CoordinateCheckDTO, CoordinateCheckReport
from geodiscovery.domain.value_objects import is_valid_coordinate


class ValidateCoordinatesQuery:
    """Per-item validity report for a list of coordinate pairs."""

    def execute(self, coordinates: Sequence[Mapping[str, Any]]) -> CoordinateCheckReport:
        if not isinstance(coordinates, (list, tuple)):
            raise InvalidArgumentError("Coordinates array is required")

        report = CoordinateCheckReport()
        for index, item in enumerate(coordinates):
            latitude = item.get("latitude") if isinstance(item, Mapping) else None
            longitude = item.get("longitude") if isinstance(item, Mapping) else None
            valid = is_valid_coordinate(latitude, longitude)
            report.results.append(
                CoordinateCheckDTO(
                    index=index,
                    latitude=latitude,
                    longitude=longitude,
                    valid=valid,
                    error=None if valid else "Invalid coordinates",
                )
            )
        return report

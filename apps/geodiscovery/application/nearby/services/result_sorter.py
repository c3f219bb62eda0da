"""Result Sorter Service.

Presentation-side ordering of nearby results. ``sorted`` is stable, so ties
keep the repository order.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Any, Sequence, TypeVar

from geodiscovery.application.common.exceptions import InvalidArgumentError

T = TypeVar("T")


class SortKey(str, Enum):
    DISTANCE = "distance"
    PRODUCT_COUNT = "product_count"
    NAME = "name"


def _distance_key(item: Any) -> float:
    distance = getattr(item, "distance_km", None)
    # entries without a distance go last
    return math.inf if distance is None else distance


def _product_count_key(item: Any) -> int:
    count = getattr(item, "product_count", None)
    if count is None:
        count = len(getattr(item, "products", None) or [])
    return -count


def _name_key(item: Any) -> str:
    name = getattr(item, "name", None) or getattr(item, "seller_name", None) or ""
    return name.casefold()


_KEY_FUNCS = {
    SortKey.DISTANCE: _distance_key,
    SortKey.PRODUCT_COUNT: _product_count_key,
    SortKey.NAME: _name_key,
}


def parse_sort_key(key: SortKey | str) -> SortKey:
    """Parse a sort key, raising InvalidArgumentError for unknown values."""
    try:
        return SortKey(key)
    except ValueError:
        raise InvalidArgumentError(
            f"Invalid sort key '{key}'. Allowed values: {[k.value for k in SortKey]}."
        )


def sort_results(items: Sequence[T], key: SortKey | str) -> list[T]:
    """Stable sort: distance ascending, product count descending, or name ascending."""
    return sorted(items, key=_KEY_FUNCS[parse_sort_key(key)])

"""Application Services."""

from geodiscovery.application.nearby.services.nearby_entry_builder import NearbyEntryBuilder
from geodiscovery.application.nearby.services.product_filter import ProductFilterService
from geodiscovery.application.nearby.services.result_sorter import (
    SortKey,
    parse_sort_key,
    sort_results,
)
from geodiscovery.application.nearby.services.search_policy import (
    DEFAULT_RADIUS_KM,
    MAX_RADIUS_KM,
    SearchPolicyService,
)
from geodiscovery.application.nearby.services.seller_grouping import SellerGroupingService

__all__ = [
    "DEFAULT_RADIUS_KM",
    "MAX_RADIUS_KM",
    "NearbyEntryBuilder",
    "ProductFilterService",
    "SearchPolicyService",
    "SellerGroupingService",
    "SortKey",
    "parse_sort_key",
    "sort_results",
]

"""Application Services tests."""

from __future__ import annotations

import math

import pytest

from geodiscovery.application.common.exceptions import (
    InvalidArgumentError,
    InvalidCoordinateError,
    InvalidRadiusError,
)
from geodiscovery.application.nearby.dto import ProductFilters
from geodiscovery.application.nearby.services import (
    NearbyEntryBuilder,
    ProductFilterService,
    SearchPolicyService,
    SellerGroupingService,
    SortKey,
    parse_sort_key,
    sort_results,
)
from geodiscovery.tests.fakes import make_product, make_seller


def _products(prices, category="Vegetables", organic=False):
    seller = make_seller("s-1", "Green Farm")
    return [
        NearbyEntryBuilder.build_product(
            make_product(f"p-{i}", seller.id, price=price, category=category, organic=organic),
            seller,
            distance_km=1.0,
        )
        for i, price in enumerate(prices)
    ]


class TestSearchPolicyService:
    """SearchPolicyService tests."""

    def test_validate_coordinates_returns_value_object(self) -> None:
        """Valid input becomes Coordinates."""
        point = SearchPolicyService.validate_coordinates(28.6, 77.2)
        assert (point.latitude, point.longitude) == (28.6, 77.2)

    def test_validate_coordinates_rejects_invalid(self) -> None:
        """Invalid input raises InvalidCoordinateError."""
        with pytest.raises(InvalidCoordinateError):
            SearchPolicyService.validate_coordinates(100, 77.2)

    def test_resolve_radius_default(self) -> None:
        """None resolves to the default radius."""
        assert SearchPolicyService.resolve_radius(None, 50.0, 500.0) == 50.0

    def test_resolve_radius_upper_bound_inclusive(self) -> None:
        """The maximum radius itself is allowed."""
        assert SearchPolicyService.resolve_radius(500, 50.0, 500.0) == 500.0

    @pytest.mark.parametrize("radius", [0, -1, 500.01, math.inf, math.nan, True, "10"])
    def test_resolve_radius_rejects(self, radius) -> None:
        """Zero, negative and oversized radii are rejected."""
        with pytest.raises(InvalidRadiusError):
            SearchPolicyService.resolve_radius(radius, 50.0, 500.0)

    def test_invalid_radius_is_invalid_argument(self) -> None:
        """InvalidRadiusError is an InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError):
            SearchPolicyService.resolve_radius(0, 50.0, 500.0)


class TestProductFilterService:
    """ProductFilterService tests."""

    def test_empty_filters_keep_everything(self) -> None:
        """No filters keep every product."""
        products = _products([10, 20, 30])
        assert ProductFilterService.apply(products, ProductFilters()) == products

    def test_price_range_inclusive(self) -> None:
        """Price bounds are inclusive."""
        products = _products([10, 15, 20, 25, 30])
        result = ProductFilterService.apply(
            products, ProductFilters(min_price=15, max_price=25)
        )
        assert [p.product_price for p in result] == [15, 20, 25]

    def test_price_range_only_middle(self) -> None:
        """Only prices inside the range remain."""
        products = _products([10, 20, 30])
        result = ProductFilterService.apply(
            products, ProductFilters(min_price=15, max_price=25)
        )
        assert [p.product_price for p in result] == [20]

    def test_price_filter_excludes_unpriced(self) -> None:
        """Unpriced products fail a price filter."""
        products = _products([None, 20])
        result = ProductFilterService.apply(products, ProductFilters(min_price=0))
        assert [p.product_price for p in result] == [20]

    def test_category_case_insensitive_substring(self) -> None:
        """Category is a case-insensitive substring."""
        products = _products([10], category="Leafy Vegetables")
        assert ProductFilterService.apply(products, ProductFilters(category="vegetable"))
        assert not ProductFilterService.apply(products, ProductFilters(category="fruit"))

    def test_organic_exact_match(self) -> None:
        """Organic is an exact boolean match."""
        organic = _products([10], organic=True)
        regular = _products([10], organic=False)
        products = organic + regular
        assert ProductFilterService.apply(products, ProductFilters(organic=True)) == organic
        assert ProductFilterService.apply(products, ProductFilters(organic=False)) == regular

    def test_filters_are_anded(self) -> None:
        """All filters must match."""
        products = _products([10, 20], category="Fruits") + _products([20], category="Vegetables")
        result = ProductFilterService.apply(
            products, ProductFilters(category="fruit", min_price=15)
        )
        assert len(result) == 1
        assert result[0].product_category == "Fruits"
        assert result[0].product_price == 20


class TestSellerGroupingService:
    """SellerGroupingService tests."""

    def test_groups_in_first_seen_order(self) -> None:
        """Groups follow first-seen seller order."""
        seller_a = make_seller("a", "Alpha Farm")
        seller_b = make_seller("b", "Beta Farm")
        products = [
            NearbyEntryBuilder.build_product(make_product("1", "a"), seller_a, 2.0),
            NearbyEntryBuilder.build_product(make_product("2", "b"), seller_b, 3.0),
            NearbyEntryBuilder.build_product(make_product("3", "a"), seller_a, 2.0),
        ]

        groups = SellerGroupingService.group_by_seller(products)

        assert [g.seller_id for g in groups] == ["a", "b"]
        assert [p.id for p in groups[0].products] == ["1", "3"]
        assert groups[0].distance_km == 2.0
        assert groups[1].product_count == 1

    def test_empty(self) -> None:
        """No products, no groups."""
        assert SellerGroupingService.group_by_seller([]) == []


class TestSortResults:
    """sort_results tests."""

    def _sellers(self):
        return [
            NearbyEntryBuilder.build_seller(make_seller("1", "carrot co"), 5.0, product_count=1),
            NearbyEntryBuilder.build_seller(make_seller("2", "Apple Farm"), None, product_count=3),
            NearbyEntryBuilder.build_seller(make_seller("3", "banana hub"), 2.0, product_count=3),
            NearbyEntryBuilder.build_seller(make_seller("4", "Date Palms"), 2.0, product_count=0),
        ]

    def test_by_distance_missing_last_and_stable(self) -> None:
        """Missing distances go last; ties keep order."""
        result = sort_results(self._sellers(), "distance")
        assert [s.id for s in result] == ["3", "4", "1", "2"]

    def test_by_product_count_descending_stable(self) -> None:
        """Product count descending, stable."""
        result = sort_results(self._sellers(), "product_count")
        assert [s.id for s in result] == ["2", "3", "1", "4"]

    def test_by_name_case_insensitive(self) -> None:
        """Name order ignores case."""
        result = sort_results(self._sellers(), "name")
        assert [s.name for s in result] == ["Apple Farm", "banana hub", "carrot co", "Date Palms"]

    def test_does_not_mutate_input(self) -> None:
        """Input list is left untouched."""
        sellers = self._sellers()
        sort_results(sellers, "name")
        assert [s.id for s in sellers] == ["1", "2", "3", "4"]

    def test_unknown_key(self) -> None:
        """Unknown key raises InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError):
            sort_results(self._sellers(), "rating")

    def test_parse_sort_key(self) -> None:
        """Known keys parse to SortKey; unknown keys are rejected."""
        assert parse_sort_key("product_count") is SortKey.PRODUCT_COUNT
        with pytest.raises(InvalidArgumentError):
            parse_sort_key("price")


class TestNearbyEntryBuilder:
    """NearbyEntryBuilder tests."""

    def test_build_seller_rounds_and_formats_distance(self) -> None:
        """Distance is rounded and formatted."""
        entry = NearbyEntryBuilder.build_seller(make_seller("1", "Farm"), distance_km=0.4567)
        assert entry.distance_km == 0.46
        assert entry.distance_text == "460m"

    def test_build_seller_without_coordinates(self) -> None:
        """Seller without coordinates has no distance."""
        entry = NearbyEntryBuilder.build_seller(make_seller("1", "Farm", coordinates=None))
        assert entry.latitude is None
        assert entry.distance_km is None
        assert entry.distance_text is None

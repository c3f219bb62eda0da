"""Test fixtures for geodiscovery tests."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from geodiscovery.domain.entities import Product, Seller
from geodiscovery.tests.fakes import (
    DELHI,
    DELHI_NORTH,
    FakeLocationReader,
    StubGeocoder,
    make_product,
    make_seller,
)


@pytest.fixture
def mock_location_reader() -> AsyncMock:
    """LocationReader mock."""
    reader = AsyncMock()
    reader.find_sellers_within_radius = AsyncMock(return_value=[])
    reader.find_products_within_radius = AsyncMock(return_value=[])
    reader.search_sellers_by_text = AsyncMock(return_value=[])
    reader.count_available_products = AsyncMock(return_value={})
    reader.list_seller_cities = AsyncMock(return_value=[])
    reader.find_seller_by_id = AsyncMock(return_value=None)
    reader.list_available_products = AsyncMock(return_value=[])
    return reader


@pytest.fixture
def mock_location_writer() -> AsyncMock:
    """LocationWriter mock echoing back the stored profile."""
    writer = AsyncMock()
    writer.update_user_location = AsyncMock(side_effect=lambda user_id, location: location)
    return writer


@pytest.fixture
def sample_seller() -> Seller:
    return make_seller("seller-1", "Green Farm")


@pytest.fixture
def sample_product(sample_seller: Seller) -> Product:
    return make_product("product-1", sample_seller.id)


@pytest.fixture
def delhi_reader() -> FakeLocationReader:
    """Reader holding one seller in north Delhi with two products."""
    seller = make_seller("seller-1", "Green Farm", coordinates=DELHI_NORTH)
    return FakeLocationReader(
        sellers=[seller],
        products=[
            make_product("p-1", seller.id, name="Tomato", price=20.0),
            make_product("p-2", seller.id, name="Spinach", price=15.0, organic=True),
        ],
    )


@pytest.fixture
def stub_geocoder() -> StubGeocoder:
    return StubGeocoder({"Connaught Place": DELHI, "Delhi": DELHI, "ValidAddr": DELHI})

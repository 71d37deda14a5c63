from decimal import Decimal

import pytest

from rest_framework.test import APIClient

from modules.products.models import Product


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def make_product():
    """Factory persisting a product with sensible defaults."""

    def _make(**overrides) -> Product:
        defaults = {
            "name": "Test Product",
            "price": Decimal("1000"),
            "stock": 10,
        }
        defaults.update(overrides)
        return Product.objects.create(**defaults)

    return _make


@pytest.fixture()
def product(make_product):
    """A product with ``stock == 10``."""
    return make_product()

from decimal import Decimal

import pytest

from rest_framework.test import APIClient


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


@pytest.fixture()
def make_product():
    """Factory persisting a Product with overridable defaults."""
    from modules.products.models import Product

    def _make(**overrides) -> Product:
        defaults = {
            "name": "Widget",
            "brand": "Acme",
            "price": Decimal("19.99"),
        }
        defaults.update(overrides)
        return Product.objects.create(**defaults)

    return _make

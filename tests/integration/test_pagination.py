"""Integration tests for the paginated product listing."""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.products.models import Product

pytestmark = pytest.mark.integration

BASE_URL = "/api/v1/products"


@pytest.fixture()
def product_batch():
    """Create twelve products one by one so creation order is well defined."""
    return [
        Product.objects.create(
            name=f"Product {idx:03d}",
            brand="Batch",
            price=Decimal("9.99"),
        )
        for idx in range(1, 13)
    ]


class TestPagination:
    def test_empty_catalog_returns_204(self, api_client):
        response = api_client.get(BASE_URL)

        assert response.status_code == 204
        assert not response.content

    def test_default_page_size_is_five(self, api_client, product_batch):
        response = api_client.get(BASE_URL)

        assert response.status_code == 200
        assert len(response.data) == 5

    def test_first_page_in_insertion_order(self, api_client, product_batch):
        response = api_client.get(BASE_URL, {"page": 1, "page_size": 5})

        assert [item["id"] for item in response.data] == [
            str(p.id) for p in product_batch[:5]
        ]

    def test_third_page_holds_the_remainder(self, api_client, product_batch):
        response = api_client.get(BASE_URL, {"page": 3, "page_size": 5})

        assert response.status_code == 200
        assert [item["name"] for item in response.data] == ["Product 011", "Product 012"]

    def test_page_past_the_end_returns_204(self, api_client, product_batch):
        response = api_client.get(BASE_URL, {"page": 4, "page_size": 5})
        assert response.status_code == 204

    def test_pages_do_not_overlap(self, api_client, product_batch):
        seen = []
        for page in (1, 2, 3):
            response = api_client.get(BASE_URL, {"page": page, "page_size": 5})
            seen.extend(item["id"] for item in response.data)

        assert seen == [str(p.id) for p in product_batch]

    def test_max_page_size(self, api_client, product_batch):
        response = api_client.get(BASE_URL, {"page_size": 50})

        assert response.status_code == 200
        assert len(response.data) == 12

    @pytest.mark.parametrize(
        "params",
        [{"page": 0}, {"page_size": 0}, {"page_size": 51}, {"page": "abc"}],
    )
    def test_out_of_range_returns_400(self, api_client, product_batch, params):
        response = api_client.get(BASE_URL, params)

        assert response.status_code == 400
        assert response.data["type"] == "validation_error"

    def test_page_beyond_any_offset_returns_204(self, api_client, product_batch):
        response = api_client.get(BASE_URL, {"page": str(10**20), "page_size": 50})
        assert response.status_code == 204

    def test_camel_case_page_size(self, api_client, product_batch):
        response = api_client.get(BASE_URL, {"page": 1, "pageSize": 10})

        assert response.status_code == 200
        assert [item["id"] for item in response.data] == [
            str(p.id) for p in product_batch[:10]
        ]

    def test_camel_case_page_size_is_validated(self, api_client, product_batch):
        response = api_client.get(BASE_URL, {"pageSize": 51})

        assert response.status_code == 400
        assert response.data["errors"][0]["attr"] == "page_size"

"""Integration tests for Product API endpoints.

Covers:
- CRUD operations via /api/v1/products.
- Service error mapping (404, 422) and boundary validation (400).
- 204 for empty listings and unknown ids.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.products.models import Product

pytestmark = pytest.mark.integration

BASE_URL = "/api/v1/products"
MISSING_ID = "00000000-0000-7000-8000-000000000000"


@pytest.fixture()
def sample_product(make_product):
    return make_product(name="Widget Alpha", brand="Acme", price=Decimal("19.99"))


# ===========================================================================
# RETRIEVE
# ===========================================================================


class TestProductRetrieve:
    def test_retrieve_success(self, api_client, sample_product):
        response = api_client.get(f"{BASE_URL}/{sample_product.id}")

        assert response.status_code == 200
        assert response.data["id"] == str(sample_product.id)
        assert response.data["name"] == "Widget Alpha"
        assert response.data["brand"] == "Acme"
        assert Decimal(response.data["price"]) == Decimal("19.99")

    def test_retrieve_is_case_insensitive(self, api_client, sample_product):
        response = api_client.get(f"{BASE_URL}/{str(sample_product.id).upper()}")
        assert response.status_code == 200

    def test_retrieve_absent_returns_204(self, api_client):
        response = api_client.get(f"{BASE_URL}/{MISSING_ID}")

        assert response.status_code == 204
        assert not response.content

    def test_non_uuid_id_does_not_route(self, api_client):
        response = api_client.get(f"{BASE_URL}/not-a-uuid")
        assert response.status_code == 404


# ===========================================================================
# CREATE
# ===========================================================================


class TestProductCreate:
    def test_create_success(self, api_client):
        payload = {"name": "New Product", "brand": "Globex", "price": "29.99"}

        response = api_client.post(BASE_URL, payload, format="json")

        assert response.status_code == 200
        assert response.data["name"] == "New Product"
        assert response.data["brand"] == "Globex"
        assert "id" in response.data
        assert Product.objects.filter(id=response.data["id"]).exists()

    def test_round_trip(self, api_client):
        payload = {"name": "Round Trip", "brand": "Initech", "price": 42.5}

        created = api_client.post(BASE_URL, payload, format="json")
        fetched = api_client.get(f"{BASE_URL}/{created.data['id']}")

        assert fetched.status_code == 200
        assert fetched.data["name"] == "Round Trip"
        assert fetched.data["brand"] == "Initech"
        assert Decimal(fetched.data["price"]) == Decimal("42.5")

    def test_duplicate_name_and_brand_returns_422(self, api_client, sample_product):
        payload = {"name": "Widget Alpha", "brand": "Acme", "price": "9.99"}

        response = api_client.post(BASE_URL, payload, format="json")

        assert response.status_code == 422
        assert response.data["errors"][0]["code"] == "already_exists"
        assert Product.objects.count() == 1

    def test_same_name_other_brand_is_created(self, api_client, sample_product):
        payload = {"name": "Widget Alpha", "brand": "Globex", "price": "9.99"}

        response = api_client.post(BASE_URL, payload, format="json")

        assert response.status_code == 200

    def test_missing_fields_returns_400(self, api_client):
        response = api_client.post(BASE_URL, {"name": "Incomplete"}, format="json")

        assert response.status_code == 400
        attrs = {error["attr"] for error in response.data["errors"]}
        assert attrs == {"brand", "price"}

    @pytest.mark.parametrize("price", ["1", "1000"])
    def test_price_bounds_accepted(self, api_client, price):
        payload = {"name": "Bounded", "brand": "Acme", "price": price}

        response = api_client.post(BASE_URL, payload, format="json")

        assert response.status_code == 200

    @pytest.mark.parametrize("price", ["0.99", "1000.01"])
    def test_price_out_of_range_returns_400(self, api_client, price):
        payload = {"name": "Bounded", "brand": "Acme", "price": price}

        response = api_client.post(BASE_URL, payload, format="json")

        assert response.status_code == 400
        assert response.data["errors"][0]["attr"] == "price"
        assert response.data["errors"][0]["code"] == "range"
        assert not Product.objects.exists()

    def test_short_name_returns_400(self, api_client):
        payload = {"name": "Ab", "brand": "Acme", "price": "10"}

        response = api_client.post(BASE_URL, payload, format="json")

        assert response.status_code == 400
        assert response.data["errors"][0]["code"] == "length"


# ===========================================================================
# UPDATE (PUT)
# ===========================================================================


class TestProductUpdate:
    def test_put_success(self, api_client, sample_product):
        payload = {"name": "Widget Beta", "brand": "Acme Corp", "price": "25.00"}

        response = api_client.put(f"{BASE_URL}/{sample_product.id}", payload, format="json")

        assert response.status_code == 200
        sample_product.refresh_from_db()
        assert sample_product.name == "Widget Beta"
        assert sample_product.brand == "Acme Corp"
        assert sample_product.price == Decimal("25.00")

    def test_put_preserves_id(self, api_client, sample_product):
        payload = {"name": "Widget Beta", "brand": "Acme", "price": "25.00"}

        response = api_client.put(f"{BASE_URL}/{sample_product.id}", payload, format="json")

        assert response.data["id"] == str(sample_product.id)
        assert Product.objects.count() == 1

    def test_put_not_found(self, api_client):
        payload = {"name": "Ghost", "brand": "Nobody", "price": "5"}

        response = api_client.put(f"{BASE_URL}/{MISSING_ID}", payload, format="json")

        assert response.status_code == 404
        assert response.data["errors"][0]["code"] == "not_found"

    def test_put_onto_another_products_pair_returns_422(
        self, api_client, sample_product, make_product
    ):
        other = make_product(name="Widget Gamma", brand="Acme")
        payload = {"name": "Widget Alpha", "brand": "Acme", "price": "5"}

        response = api_client.put(f"{BASE_URL}/{other.id}", payload, format="json")

        assert response.status_code == 422

    def test_put_invalid_payload_returns_400(self, api_client, sample_product):
        payload = {"name": "Widget", "brand": "Acme", "price": "5000"}

        response = api_client.put(f"{BASE_URL}/{sample_product.id}", payload, format="json")

        assert response.status_code == 400

    def test_plain_patch_is_not_allowed(self, api_client, sample_product):
        response = api_client.patch(
            f"{BASE_URL}/{sample_product.id}", {"name": "Nope"}, format="json"
        )
        assert response.status_code == 405


# ===========================================================================
# UPDATE PRICE (PATCH)
# ===========================================================================


class TestProductUpdatePrice:
    def test_patch_price_success(self, api_client, sample_product):
        response = api_client.patch(f"{BASE_URL}/{sample_product.id}/price/49.9")

        assert response.status_code == 200
        sample_product.refresh_from_db()
        assert sample_product.price == Decimal("49.90")
        assert sample_product.name == "Widget Alpha"
        assert sample_product.brand == "Acme"

    def test_patch_price_integer(self, api_client, sample_product):
        response = api_client.patch(f"{BASE_URL}/{sample_product.id}/price/1000")
        assert response.status_code == 200

    def test_patch_price_not_found(self, api_client):
        response = api_client.patch(f"{BASE_URL}/{MISSING_ID}/price/10")
        assert response.status_code == 404

    @pytest.mark.parametrize("price", ["0.99", "1000.01"])
    def test_patch_price_out_of_range_returns_400(self, api_client, sample_product, price):
        response = api_client.patch(f"{BASE_URL}/{sample_product.id}/price/{price}")

        assert response.status_code == 400
        sample_product.refresh_from_db()
        assert sample_product.price == Decimal("19.99")


# ===========================================================================
# DESTROY
# ===========================================================================


class TestProductDestroy:
    def test_destroy_success(self, api_client, sample_product):
        response = api_client.delete(f"{BASE_URL}/{sample_product.id}")

        assert response.status_code == 200
        assert not Product.objects.filter(id=sample_product.id).exists()

    def test_destroy_twice(self, api_client, sample_product):
        first = api_client.delete(f"{BASE_URL}/{sample_product.id}")
        second = api_client.delete(f"{BASE_URL}/{sample_product.id}")

        assert first.status_code == 200
        assert second.status_code == 404

    def test_destroy_not_found(self, api_client):
        response = api_client.delete(f"{BASE_URL}/{MISSING_ID}")
        assert response.status_code == 404

"""Integration tests for Product API endpoints.

Covers:
- List, create, delete and the name / color / price look-ups via /api/products.
- Domain exception mapping (400, 404, 500).
"""

from __future__ import annotations

import uuid
from decimal import Decimal
from unittest.mock import patch

import pytest

from modules.products.models import Product

pytestmark = pytest.mark.integration


# ===========================================================================
# LIST
# ===========================================================================


class TestProductList:
    def test_list_empty(self, api_client):
        response = api_client.get("/api/products")
        assert response.status_code == 200
        assert response.data == []

    def test_list_returns_products(self, api_client, make_product):
        make_product(name="Product A", price=Decimal("10.99"))
        make_product(name="Product B", price=Decimal("20.99"))

        response = api_client.get("/api/products")

        assert response.status_code == 200
        assert [p["name"] for p in response.data] == ["Product A", "Product B"]

    def test_retrieval_failure_returns_500(self, api_client):
        with patch(
            "modules.products.repositories.django_repository."
            "ProductDjangoRepository.find_all",
            return_value=None,
        ):
            response = api_client.get("/api/products")

        assert response.status_code == 500
        assert response.data["detail"] == "Failed to retrieve products."


# ===========================================================================
# CREATE
# ===========================================================================


class TestProductCreate:
    def test_create_success(self, api_client):
        payload = {
            "name": "Test Product",
            "description": "A test product",
            "color": "Blue",
            "price": "99.99",
            "stock_quantity": 50,
        }
        response = api_client.post("/api/products", payload, format="json")

        assert response.status_code == 201
        assert response.data["name"] == "Test Product"
        assert response.data["color"] == "Blue"
        assert response.data["price"] == "99.99"
        assert response.data["stock_quantity"] == 50
        assert response.data["id"]
        assert Product.objects.count() == 1

    def test_missing_name_returns_400(self, api_client):
        payload = {"price": "15.00", "stock_quantity": 5}
        response = api_client.post("/api/products", payload, format="json")

        assert response.status_code == 400
        assert response.data == {
            "detail": "Product name cannot be null or empty.",
            "field": "name",
            "code": "name_required",
        }
        assert Product.objects.count() == 0

    def test_negative_price_returns_400(self, api_client):
        payload = {"name": "Bad", "price": "-20.0"}
        response = api_client.post("/api/products", payload, format="json")

        assert response.status_code == 400
        assert response.data["code"] == "price_negative"

    def test_negative_stock_returns_400(self, api_client):
        payload = {"name": "Bad", "price": "1.00", "stock_quantity": -1}
        response = api_client.post("/api/products", payload, format="json")

        assert response.status_code == 400
        assert response.data["detail"] == "Stock quantity cannot be negative."

    def test_malformed_price_returns_400(self, api_client):
        payload = {"name": "Bad", "price": "cheap"}
        response = api_client.post("/api/products", payload, format="json")

        assert response.status_code == 400
        assert Product.objects.count() == 0


# ===========================================================================
# DESTROY
# ===========================================================================


class TestProductDestroy:
    def test_destroy_success(self, api_client, make_product):
        product = make_product(name="Product to Delete")

        response = api_client.delete(f"/api/products/{product.id}")

        assert response.status_code == 204
        assert not Product.objects.filter(id=product.id).exists()

    def test_destroy_not_found(self, api_client):
        missing = uuid.uuid4()
        response = api_client.delete(f"/api/products/{missing}")

        assert response.status_code == 404
        assert response.data["detail"] == f"Product not found with id: {missing}"

    def test_destroy_malformed_id_is_not_found(self, api_client):
        response = api_client.delete("/api/products/not-a-uuid")
        assert response.status_code == 404


# ===========================================================================
# LOOK-UPS
# ===========================================================================


class TestProductLookups:
    def test_by_name(self, api_client, make_product):
        make_product(name="Test Product")

        response = api_client.get("/api/products/name/Test Product")

        assert response.status_code == 200
        assert response.data[0]["name"] == "Test Product"

    def test_by_name_not_found(self, api_client):
        response = api_client.get("/api/products/name/Unknown")

        assert response.status_code == 404
        assert response.data["detail"] == "No products found with name: Unknown"

    def test_by_blank_name_returns_400(self, api_client):
        response = api_client.get("/api/products/name/%20%20")
        assert response.status_code == 400
        assert response.data["code"] == "name_required"

    def test_by_color(self, api_client, make_product):
        make_product(name="Product A", color="Red")
        make_product(name="Product B", color="Red")
        make_product(name="Product C", color="Blue")

        response = api_client.get("/api/products/color/Red")

        assert response.status_code == 200
        assert [p["name"] for p in response.data] == ["Product A", "Product B"]

    def test_by_color_not_found(self, api_client):
        response = api_client.get("/api/products/color/InvisibleColor")
        assert response.status_code == 404

    def test_by_price_range(self, api_client, make_product):
        make_product(name="Product A", price=Decimal("15.99"))
        make_product(name="Product B", price=Decimal("25.99"))
        make_product(name="Product C", price=Decimal("45.00"))

        response = api_client.get(
            "/api/products/price", {"minPrice": "10.0", "maxPrice": "30.0"}
        )

        assert response.status_code == 200
        assert [p["name"] for p in response.data] == ["Product A", "Product B"]

    def test_by_price_range_inverted_returns_400(self, api_client):
        response = api_client.get(
            "/api/products/price", {"minPrice": "100", "maxPrice": "50"}
        )

        assert response.status_code == 400
        assert response.data["detail"] == "minPrice cannot be greater than maxPrice."

    def test_by_price_range_negative_returns_400(self, api_client):
        response = api_client.get(
            "/api/products/price", {"minPrice": "-10", "maxPrice": "50"}
        )

        assert response.status_code == 400
        assert response.data["detail"] == "Price values cannot be negative."

    def test_by_price_range_missing_bound_returns_400(self, api_client):
        response = api_client.get("/api/products/price", {"minPrice": "10"})
        assert response.status_code == 400

    def test_by_price_range_no_matches_returns_404(self, api_client):
        response = api_client.get(
            "/api/products/price", {"minPrice": "10", "maxPrice": "20"}
        )
        assert response.status_code == 404


class TestProductCreateBody:
    def test_non_object_body_returns_400(self, api_client):
        response = api_client.post("/api/products", [{"name": "x"}], format="json")
        assert response.status_code == 400
        assert Product.objects.count() == 0


class TestProductCreateStorageBounds:
    def test_price_beyond_column_precision_returns_400(self, api_client):
        payload = {"name": "Big", "price": "123456789012"}
        response = api_client.post("/api/products", payload, format="json")

        assert response.status_code == 400
        assert Product.objects.count() == 0

    def test_stock_beyond_integer_column_returns_400(self, api_client):
        payload = {"name": "Huge", "price": "1.00", "stock_quantity": 2**70}
        response = api_client.post("/api/products", payload, format="json")

        assert response.status_code == 400
        assert Product.objects.count() == 0


class TestProductCreateFieldNames:
    def test_camel_case_body_keeps_stock_quantity(self, api_client):
        payload = {
            "name": "Test Product",
            "description": "A test product",
            "price": 99.99,
            "stockQuantity": 50,
        }
        response = api_client.post("/api/products", payload, format="json")

        assert response.status_code == 201
        assert response.data["stock_quantity"] == 50
        assert response.data["price"] == "99.99"
        assert Product.objects.get().stock_quantity == 50

    def test_unknown_field_returns_400(self, api_client):
        payload = {"name": "Typo", "price": "1.00", "stock_qty": 5}
        response = api_client.post("/api/products", payload, format="json")

        assert response.status_code == 400
        assert Product.objects.count() == 0

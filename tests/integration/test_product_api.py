"""Integration tests for Product API endpoints."""

from __future__ import annotations

import pytest

from modules.products.models import Product

pytestmark = pytest.mark.integration

URL = "/api/v1/products/"


class TestProductList:
    def test_lists_products(self, api_client, make_product):
        make_product(name="MacBook Pro", stock=10)
        make_product(name="AirPods Pro", stock=0)

        response = api_client.get(URL)

        assert response.status_code == 200
        assert response.json()["count"] == 2

    def test_in_stock_filter(self, api_client, make_product):
        make_product(name="MacBook Pro", stock=10)
        make_product(name="AirPods Pro", stock=0)

        response = api_client.get(URL, {"in_stock": "true"})

        names = [p["name"] for p in response.json()["results"]]
        assert names == ["MacBook Pro"]


class TestProductRetrieve:
    def test_retrieve(self, api_client, product):
        response = api_client.get(f"{URL}{product.id}/")

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == product.id
        assert body["stock"] == 10
        assert body["price"] == "1000.00"

    def test_not_found(self, api_client):
        response = api_client.get(f"{URL}99999/")
        assert response.status_code == 404


class TestProductCreate:
    def test_create(self, api_client):
        payload = {
            "name": "iPhone 15 Pro",
            "price": "159800",
            "stock": 25,
            "description": "A17 Pro chip.",
        }

        response = api_client.post(URL, payload, format="json")

        assert response.status_code == 201
        assert response.json()["name"] == "iPhone 15 Pro"
        assert Product.objects.get(name="iPhone 15 Pro").stock == 25

    def test_invalid_price_returns_400(self, api_client):
        response = api_client.post(
            URL, {"name": "Widget", "price": "-1"}, format="json"
        )

        assert response.status_code == 400
        assert Product.objects.count() == 0

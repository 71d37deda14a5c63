"""Integration tests for Order API endpoints.

Covers:
- Order placement via POST /api/v1/orders/ (201, 400, 409).
- Error body: localized ``detail`` plus the flat error payload.
- Order history list via GET /api/v1/orders/.
"""

from __future__ import annotations

from datetime import timedelta

import pytest
from django.utils import timezone

from modules.orders.models import OrderHistory

pytestmark = pytest.mark.integration

URL = "/api/v1/orders/"


class TestPlaceOrderEndpoint:
    def test_success_returns_201(self, api_client, product):
        response = api_client.post(
            URL, {"product_id": product.id, "quantity": 3}, format="json"
        )

        assert response.status_code == 201
        product.refresh_from_db()
        assert product.stock == 7
        assert OrderHistory.objects.filter(product=product, quantity=3).exists()

    def test_accepts_form_encoded_strings(self, api_client, product):
        response = api_client.post(URL, {"product_id": str(product.id), "quantity": "2"})

        assert response.status_code == 201
        product.refresh_from_db()
        assert product.stock == 8

    def test_validation_error_returns_400(self, api_client):
        response = api_client.post(
            URL, {"product_id": -1, "quantity": 1}, format="json"
        )

        assert response.status_code == 400
        body = response.json()
        assert body["code"] == "NEW_ORDER_SERVICE_VALIDATION_ERROR"
        assert body["product_id"] == ["must be greater than 0"]
        assert body["detail"].startswith("The order request is invalid")

    def test_missing_fields_return_400(self, api_client):
        response = api_client.post(URL, {}, format="json")

        body = response.json()
        assert response.status_code == 400
        assert body["product_id"] == ["is missing"]
        assert body["quantity"] == ["is missing"]

    def test_insufficient_stock_returns_409(self, api_client, product):
        response = api_client.post(
            URL, {"product_id": product.id, "quantity": 15}, format="json"
        )

        assert response.status_code == 409
        body = response.json()
        assert body["code"] == "NEW_ORDER_SERVICE_RUNTIME_INSUFFICIENT_STOCK"
        assert body["current_stock"] == 10
        assert body["requested_quantity"] == 15
        assert body["detail"] == "There is not enough stock to fulfil this order."
        product.refresh_from_db()
        assert product.stock == 10

    def test_unknown_product_returns_409(self, api_client):
        response = api_client.post(
            URL, {"product_id": 99999, "quantity": 1}, format="json"
        )

        assert response.status_code == 409
        assert response.json() == {
            "detail": "The order could not be placed. Please try again.",
            "code": "NEW_ORDER_SERVICE_RUNTIME_TRANSACTION_FAILED",
            "product_id": 99999,
            "quantity": 1,
        }


class TestOrderHistoryList:
    def test_lists_most_recent_first(self, api_client, product):
        now = timezone.now()
        OrderHistory.objects.create(
            product=product, quantity=1, ordered_at=now - timedelta(days=1)
        )
        OrderHistory.objects.create(product=product, quantity=2, ordered_at=now)

        response = api_client.get(URL)

        assert response.status_code == 200
        results = response.json()["results"]
        assert [r["quantity"] for r in results] == [2, 1]
        assert results[0]["product_name"] == product.name
        assert results[0]["product_id"] == product.id

    def test_filters_by_product(self, api_client, make_product):
        first = make_product(name="First")
        second = make_product(name="Second")
        OrderHistory.objects.create(product=first, quantity=1, ordered_at=timezone.now())
        OrderHistory.objects.create(
            product=second, quantity=4, ordered_at=timezone.now()
        )

        response = api_client.get(URL, {"product": second.id})

        results = response.json()["results"]
        assert len(results) == 1
        assert results[0]["quantity"] == 4

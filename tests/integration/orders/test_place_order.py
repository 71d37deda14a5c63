"""Integration tests for order placement against the real repositories.

Scenarios:
- stock 10, order 3: success, stock 7, one order recorded.
- stock 10, order 15: insufficient_stock, nothing written.
- unknown product: transaction_failed, nothing written.
- invalid product_id: validation_error, nothing written.
"""

from __future__ import annotations

import pytest
from freezegun import freeze_time

from modules.orders.models import OrderHistory
from modules.orders.repositories.django_repository import OrderHistoryDjangoRepository
from modules.orders.services import OrderPlacementService
from modules.products.repositories.django_repository import ProductDjangoRepository

pytestmark = pytest.mark.integration


@pytest.fixture()
def service():
    return OrderPlacementService(
        product_repository=ProductDjangoRepository(),
        order_history_repository=OrderHistoryDjangoRepository(),
    )


class TestPlaceOrder:
    @freeze_time("2025-08-09 04:34:37")
    def test_success_decrements_stock_and_records_order(self, service, product):
        result = service.place_order(product_id=product.id, quantity=3)

        assert result.is_success
        product.refresh_from_db()
        assert product.stock == 7
        assert OrderHistory.objects.count() == 1

        order = OrderHistory.objects.get()
        assert order.product_id == product.id
        assert order.quantity == 3
        assert order.ordered_at.isoformat() == "2025-08-09T04:34:37+00:00"

    def test_consecutive_orders_accumulate(self, service, product):
        assert service.place_order(product_id=product.id, quantity=4).is_success
        assert service.place_order(product_id=product.id, quantity=6).is_success

        product.refresh_from_db()
        assert product.stock == 0
        assert OrderHistory.objects.filter(product=product).count() == 2

        result = service.place_order(product_id=product.id, quantity=1)
        assert result.error.context == {"current_stock": 0, "requested_quantity": 1}

    def test_insufficient_stock_changes_nothing(self, service, product):
        result = service.place_order(product_id=product.id, quantity=15)

        assert result.is_failure
        assert result.error.as_dict() == {
            "code": "NEW_ORDER_SERVICE_RUNTIME_INSUFFICIENT_STOCK",
            "current_stock": 10,
            "requested_quantity": 15,
        }
        product.refresh_from_db()
        assert product.stock == 10
        assert OrderHistory.objects.count() == 0

    def test_unknown_product_is_transaction_failed(self, service):
        result = service.place_order(product_id=99999, quantity=1)

        assert result.error.as_dict() == {
            "code": "NEW_ORDER_SERVICE_RUNTIME_TRANSACTION_FAILED",
            "product_id": 99999,
            "quantity": 1,
        }
        assert OrderHistory.objects.count() == 0

    def test_validation_error_changes_nothing(self, service, product):
        for _ in range(2):
            result = service.place_order(product_id=-1, quantity=1)

            assert result.error.code == "NEW_ORDER_SERVICE_VALIDATION_ERROR"
            assert result.error.context == {"product_id": ["must be greater than 0"]}

        product.refresh_from_db()
        assert product.stock == 10
        assert OrderHistory.objects.count() == 0

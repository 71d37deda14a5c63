"""Order placement service layer (Use Case).

The only multi-step, state-changing operation of the shop: record an
order for a single product while decrementing its stock.

Steps (first failure wins, later steps never run):
1. Validate the raw request (``OrderRequestContract``).
2. Lock the product row (SELECT FOR UPDATE) inside the atomic unit.
3. Check that stock covers the requested quantity.
4. Write the new stock and insert the order history record.

Every failure leaves as an ``OrderError`` value; no exception escapes
``place_order``.  Writes happen inside ``transaction.atomic()`` so the
stock change and the order record commit together or not at all.
Concurrent orders for the same product serialize on the row lock.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog
from django.db import transaction
from django.utils import timezone

from modules.orders.constants import OrderErrorKind
from modules.orders.contracts import OrderRequestContract
from modules.orders.errors import OrderError
from modules.orders.exceptions import OrderTransactionAborted
from shared.domain.result import Failure, Result, Success

if TYPE_CHECKING:
    from modules.orders.dtos import PlaceOrderDTO
    from modules.orders.repositories.interfaces import IOrderHistoryRepository
    from modules.products.models import Product
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class OrderPlacementService:
    """Application service for placing single-item orders.

    Receives repositories via constructor injection (DIP).
    """

    def __init__(
        self,
        product_repository: IProductRepository,
        order_history_repository: IOrderHistoryRepository,
    ) -> None:
        self._product_repo = product_repository
        self._order_history_repo = order_history_repository
        self._contract = OrderRequestContract()

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def place_order(self, product_id: Any, quantity: Any) -> Result[None, OrderError]:
        """Place an order for ``quantity`` units of ``product_id``.

        Returns ``Success(None)`` or ``Failure(OrderError)`` with kind:
        - ``validation_error``: ``{field: [messages]}`` context.
        - ``insufficient_stock``: ``current_stock``, ``requested_quantity``.
        - ``transaction_failed``: ``product_id``, ``quantity``; covers a
          missing product as well as any fault during the writes.
        """
        validation = self._contract.call(product_id=product_id, quantity=quantity)
        if validation.is_failure:
            logger.info("order.validation_failed", errors=validation.error)
            return Failure(
                OrderError.create(OrderErrorKind.VALIDATION_ERROR, **validation.error)
            )

        return self._execute_order(validation.unwrap())

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _execute_order(self, request: PlaceOrderDTO) -> Result[None, OrderError]:
        log = logger.bind(product_id=request.product_id, quantity=request.quantity)
        log.info("order.placement_started")

        try:
            with transaction.atomic():
                found = self._find_product(request.product_id)
                if found.is_failure:
                    raise OrderTransactionAborted("find_product", found.error.code)
                product = found.unwrap()

                stock_check = self._check_stock(product, request.quantity)
                if stock_check.is_failure:
                    log.info("order.insufficient_stock", current_stock=product.stock)
                    return stock_check

                new_stock = product.stock - request.quantity
                updated = self._product_repo.update_stock(
                    request.product_id, new_stock
                )
                if updated.is_failure:
                    raise OrderTransactionAborted("update_stock", updated.error)

                created = self._order_history_repo.create(
                    {
                        "product_id": request.product_id,
                        "quantity": request.quantity,
                        "ordered_at": timezone.now(),
                    }
                )
                if created.is_failure:
                    raise OrderTransactionAborted(
                        "create_order_history", created.error
                    )
        except OrderTransactionAborted as exc:
            log.warning(
                "order.transaction_failed", step=exc.step, reason=str(exc.reason)
            )
            return self._transaction_failed(request)
        except Exception:
            log.exception("order.transaction_failed")
            return self._transaction_failed(request)

        log.info("order.placed", remaining_stock=new_stock)
        return Success()

    def _find_product(self, product_id: int) -> Result[Product, OrderError]:
        """Lock and return the product, or a ``product_not_found`` error."""
        result = self._product_repo.find_for_update(product_id)
        if result.is_failure:
            return Failure(
                OrderError.create(
                    OrderErrorKind.PRODUCT_NOT_FOUND, product_id=product_id
                )
            )
        return result

    @staticmethod
    def _check_stock(product: Product, quantity: int) -> Result[None, OrderError]:
        if product.stock < quantity:
            return Failure(
                OrderError.create(
                    OrderErrorKind.INSUFFICIENT_STOCK,
                    current_stock=product.stock,
                    requested_quantity=quantity,
                )
            )
        return Success()

    @staticmethod
    def _transaction_failed(request: PlaceOrderDTO) -> Failure[OrderError]:
        return Failure(
            OrderError.create(
                OrderErrorKind.TRANSACTION_FAILED,
                product_id=request.product_id,
                quantity=request.quantity,
            )
        )

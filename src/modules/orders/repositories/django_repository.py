"""Django ORM implementation of the OrderHistory repository.

Satisfies ``IOrderHistoryRepository`` using Django's QuerySet API.
``create`` runs full model validation, which also checks that the
referenced product exists, and reports problems as
``Failure(message_dict)``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from django.core.exceptions import ValidationError

from modules.orders.models import OrderHistory
from modules.orders.repositories.interfaces import IOrderHistoryRepository
from shared.domain.result import Failure, Result, Success

logger = structlog.get_logger(__name__)


class OrderHistoryDjangoRepository(IOrderHistoryRepository):
    """Concrete OrderHistory repository backed by Django ORM."""

    def find_by_id(self, id: int) -> Result[OrderHistory, str]:
        try:
            order = OrderHistory.objects.select_related("product").filter(id=id).first()
        except (TypeError, ValueError, ValidationError):
            order = None
        if order is None:
            return Failure(f"Order history not found with id: {id}")
        return Success(order)

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[OrderHistory]:
        """List order history, most recent first.

        Supported filter keys include ``product_id`` and
        ``ordered_at__range``.
        """
        queryset = OrderHistory.objects.select_related("product")
        if filters:
            queryset = queryset.filter(**filters)
        return list(queryset)

    def create(
        self, attributes: Dict[str, Any]
    ) -> Result[OrderHistory, Dict[str, List[str]]]:
        """Validate and insert a new order history record."""
        unknown = OrderHistory.unknown_fields(attributes)
        if unknown:
            return Failure({name: ["Unknown field."] for name in unknown})
        order = OrderHistory(**attributes)
        try:
            order.full_clean()
        except ValidationError as exc:
            logger.warning("order_history.create_invalid", errors=exc.message_dict)
            return Failure(exc.message_dict)
        order.save()
        logger.info(
            "order_history.created",
            order_id=order.id,
            product_id=order.product_id,
            quantity=order.quantity,
        )
        return Success(order)

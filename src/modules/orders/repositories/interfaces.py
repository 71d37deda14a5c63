"""Order history repository interface.

Order history is insert-only: the contract exposes creation and
look-ups, never updates or deletes.

The Service Layer depends exclusively on this contract (DIP).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.orders.models import OrderHistory


class IOrderHistoryRepository(IRepository["OrderHistory"]):
    """Repository contract for order history records.

    ``create`` must reject attributes whose ``product_id`` does not
    reference an existing product.
    """

"""Order history repositories package."""

from modules.orders.repositories.django_repository import OrderHistoryDjangoRepository
from modules.orders.repositories.interfaces import IOrderHistoryRepository

__all__ = ["IOrderHistoryRepository", "OrderHistoryDjangoRepository"]

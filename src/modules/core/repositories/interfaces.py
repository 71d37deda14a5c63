"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on Django ORM directly.

Look-ups and writes return ``Result`` values: a missing row or a
model validation error is a ``Failure``, never an exception.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, TypeVar

from shared.domain.result import Result

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the domain entity managed by the
    repository (e.g. ``Product``, ``OrderHistory``).
    """

    @abstractmethod
    def find_by_id(self, id: int) -> Result[T, str]:
        """Retrieve an entity by its primary key."""

    @abstractmethod
    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[T]:
        """List entities with optional filters."""

    @abstractmethod
    def create(self, attributes: Dict[str, Any]) -> Result[T, Dict[str, List[str]]]:
        """Validate and persist a new entity."""

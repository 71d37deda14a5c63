"""Product repository interface.

Extends ``IRepository[Product]`` with the stock look-ups and writes
required by order placement.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Dict, List, Union

from modules.core.repositories.interfaces import IRepository
from shared.domain.result import Result

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def find_for_update(self, id: int) -> Result[Product, str]:
        """Retrieve a product with a row-level lock (SELECT FOR UPDATE).

        Must be called inside an atomic block.  Used by order placement
        so concurrent stock decrements serialize on the product row.
        """

    @abstractmethod
    def update(
        self, id: int, attributes: Dict[str, Any]
    ) -> Result[Product, Union[str, Dict[str, List[str]]]]:
        """Apply ``attributes`` to an existing product after validation."""

    @abstractmethod
    def update_stock(
        self, id: int, new_stock: int
    ) -> Result[Product, Union[str, Dict[str, List[str]]]]:
        """Overwrite the stock count of an existing product."""

"""Product service layer (Use Cases).

Catalog look-ups and product creation, delegating persistence to the
injected ``IProductRepository``.  Stock is never adjusted here; order
placement owns stock decrements.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from django.db import transaction

from modules.products.exceptions import InvalidProduct, ProductNotFound

if TYPE_CHECKING:
    from modules.products.dtos import CreateProductDTO
    from modules.products.models import Product
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_product(self, dto: CreateProductDTO) -> Product:
        """Create a new catalog entry.

        Raises:
            InvalidProduct: if the model rejects the attributes.
        """
        result = self._repo.create(dto.model_dump())
        if result.is_failure:
            raise InvalidProduct(result.error)
        return result.unwrap()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_product(self, id: int) -> Product:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        result = self._repo.find_by_id(id)
        if result.is_failure:
            raise ProductNotFound(result.error)
        logger.info("product.retrieved", product_id=id)
        return result.unwrap()

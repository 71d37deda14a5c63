"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Methods return ``Success``/``Failure`` instead of raising: a missing
row yields ``Failure("Product not found with id: <id>")`` and model
validation errors yield ``Failure(message_dict)``.  Database faults are
not caught here; the calling service owns that boundary.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

import structlog
from django.core.exceptions import ValidationError

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository
from shared.domain.result import Failure, Result, Success

logger = structlog.get_logger(__name__)


def _not_found(id: Any) -> Failure[str]:
    return Failure(f"Product not found with id: {id}")


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def find_by_id(self, id: int) -> Result[Product, str]:
        """Retrieve a product by primary key.

        Non-existent and malformed IDs both produce a ``Failure``.
        """
        try:
            product = Product.objects.filter(id=id).first()
        except (TypeError, ValueError, ValidationError):
            product = None
        if product is None:
            return _not_found(id)
        return Success(product)

    def find_for_update(self, id: int) -> Result[Product, str]:
        """Retrieve a product holding a row-level lock until the transaction ends."""
        try:
            product = Product.objects.select_for_update().filter(id=id).first()
        except (TypeError, ValueError, ValidationError):
            product = None
        if product is None:
            return _not_found(id)
        return Success(product)

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Product]:
        """List products with optional Django ORM look-ups.

        Examples of valid filters::

            {"stock__gt": 0}
            {"name__icontains": "ipad"}
        """
        queryset = Product.objects.all()
        if filters:
            queryset = queryset.filter(**filters)
        return list(queryset)

    def create(
        self, attributes: Dict[str, Any]
    ) -> Result[Product, Dict[str, List[str]]]:
        """Validate and insert a new product."""
        unknown = Product.unknown_fields(attributes)
        if unknown:
            return Failure({name: ["Unknown field."] for name in unknown})
        product = Product(**attributes)
        try:
            product.full_clean()
        except ValidationError as exc:
            logger.warning("product.create_invalid", errors=exc.message_dict)
            return Failure(exc.message_dict)
        product.save()
        return Success(product)

    def update(
        self, id: int, attributes: Dict[str, Any]
    ) -> Result[Product, Union[str, Dict[str, List[str]]]]:
        """Validate and persist changes to an existing product."""
        found = self.find_by_id(id)
        if found.is_failure:
            return found
        unknown = Product.unknown_fields(attributes)
        if unknown:
            return Failure({name: ["Unknown field."] for name in unknown})
        product = found.unwrap()

        for field, value in attributes.items():
            setattr(product, field, value)
        try:
            product.full_clean()
        except ValidationError as exc:
            logger.warning(
                "product.update_invalid", product_id=id, errors=exc.message_dict
            )
            return Failure(exc.message_dict)

        product.save(update_fields=list(attributes))
        logger.info("product.updated", product_id=id, fields=sorted(attributes))
        return Success(product)

    def update_stock(
        self, id: int, new_stock: int
    ) -> Result[Product, Union[str, Dict[str, List[str]]]]:
        """Overwrite the stock count; negative values fail validation."""
        return self.update(id, {"stock": new_stock})

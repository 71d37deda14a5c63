"""Product model with stock control.

Constraints enforced at model and database level:
- ``name`` is required, at most 255 characters.
- ``price`` must be greater than zero.
- ``stock`` can never be negative.
- ``description`` is optional, at most 1000 characters.
"""

from __future__ import annotations

from decimal import Decimal

import structlog
from django.core.validators import MaxLengthValidator, MinValueValidator
from django.db import models

from modules.core.models import TimestampedModel

logger = structlog.get_logger(__name__)

DESCRIPTION_MAX_LENGTH = 1000


class Product(TimestampedModel):
    """Catalog entry with an available ``stock`` count.

    ``stock`` is only mutated through stock adjustments (order placement);
    catalog management creates and edits the remaining fields.
    """

    name = models.CharField(max_length=255)
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.01"))],
    )
    stock = models.PositiveIntegerField(default=0)
    description = models.TextField(
        blank=True,
        default="",
        validators=[MaxLengthValidator(DESCRIPTION_MAX_LENGTH)],
    )

    class Meta:
        db_table = "products"
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gt=0),
                name="products_price_positive",
            ),
            models.CheckConstraint(
                condition=models.Q(stock__gte=0),
                name="products_stock_non_negative",
            ),
        ]

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def save(self, *args, **kwargs) -> None:
        is_new = self._state.adding
        super().save(*args, **kwargs)
        if is_new:
            logger.info(
                "product.created",
                product_id=self.id,
                name=self.name,
                stock=self.stock,
            )

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.name} (stock: {self.stock})"

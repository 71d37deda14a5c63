"""OrderHistory model.

One row per placed order.  Records are insert-only: order placement
creates them and nothing in this codebase updates or deletes them.

- ``product`` must reference an existing product (validated on create).
- ``quantity`` is strictly positive.
- ``ordered_at`` is required and set by the order placement service.
"""

from __future__ import annotations

from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import TimestampedModel


class OrderHistory(TimestampedModel):
    """Immutable record of a single-item order."""

    product: models.ForeignKey = models.ForeignKey(
        "products.Product",
        on_delete=models.CASCADE,
        related_name="order_histories",
    )
    quantity: models.PositiveIntegerField = models.PositiveIntegerField(
        validators=[MinValueValidator(1)],
    )
    ordered_at: models.DateTimeField = models.DateTimeField()

    class Meta:
        db_table = "order_histories"
        ordering = ["-ordered_at", "-id"]
        indexes = [
            models.Index(fields=["-ordered_at"], name="order_hist_ordered_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(quantity__gte=1),
                name="order_histories_quantity_positive",
            ),
        ]

    def __str__(self) -> str:
        return f"Order #{self.pk}: product {self.product_id} x{self.quantity}"

"""Base abstract models shared by the catalog and order modules.

Provides ``TimestampedModel``: integer primary key (``DEFAULT_AUTO_FIELD``)
plus ``created_at`` / ``updated_at`` bookkeeping.  Product and order
history tables both carry these timestamps.
"""

from __future__ import annotations

from django.db import models


class TimestampedModel(models.Model):
    """Abstract base with timestamp bookkeeping."""

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True

    def save(self, *args, **kwargs) -> None:
        """Ensure ``updated_at`` is refreshed even when ``update_fields`` is passed."""
        update_fields = kwargs.get("update_fields")
        if update_fields is not None and "updated_at" not in update_fields:
            kwargs["update_fields"] = list(update_fields) + ["updated_at"]
        super().save(*args, **kwargs)

    @classmethod
    def unknown_fields(cls, attributes) -> list[str]:
        """Return the keys of ``attributes`` that name no concrete field."""
        known = set()
        for field in cls._meta.concrete_fields:
            known.update((field.name, field.attname))
        return sorted(set(attributes) - known)

"""Product domain exceptions.

Raised by ``ProductService`` for catalog operations.  The API layer
(Views) catches these and translates them into HTTP responses.
"""

from __future__ import annotations


class ProductNotFound(Exception):
    """The requested product does not exist."""


class InvalidProduct(Exception):
    """The product attributes failed model validation."""

    def __init__(self, errors: dict[str, list[str]]) -> None:
        super().__init__(f"Invalid product: {errors}")
        self.errors = errors

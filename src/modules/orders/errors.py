"""Structured order placement errors and their user-facing rendering.

``OrderError`` is the failure payload returned by ``OrderPlacementService``.
``as_dict()`` flattens it to ``{"code": ..., **context}``, the shape the
presentation layer consumes.  ``render_error_message`` treats the code
as a localization key and falls back to the raw payload text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping

from django.utils.translation import gettext_lazy as _

from modules.orders.constants import ERROR_CODES, OrderErrorKind

ERROR_MESSAGES = {
    ERROR_CODES[OrderErrorKind.VALIDATION_ERROR]: _(
        "The order request is invalid. Check the product and quantity."
    ),
    ERROR_CODES[OrderErrorKind.INSUFFICIENT_STOCK]: _(
        "There is not enough stock to fulfil this order."
    ),
    ERROR_CODES[OrderErrorKind.PRODUCT_NOT_FOUND]: _(
        "The requested product does not exist."
    ),
    ERROR_CODES[OrderErrorKind.TRANSACTION_FAILED]: _(
        "The order could not be placed. Please try again."
    ),
}


@dataclass(frozen=True)
class OrderError:
    """Failure of an order placement call."""

    kind: OrderErrorKind
    context: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def create(cls, kind: OrderErrorKind, **context: Any) -> OrderError:
        return cls(kind=kind, context=dict(context))

    @property
    def code(self) -> str:
        return ERROR_CODES[self.kind]

    def as_dict(self) -> Dict[str, Any]:
        return {"code": self.code, **self.context}


def render_error_message(payload: Any) -> str:
    """Return the localized message for ``payload``'s code, else its text."""
    if isinstance(payload, OrderError):
        payload = payload.as_dict()
    if not isinstance(payload, Mapping) or "code" not in payload:
        return str(payload)
    message = ERROR_MESSAGES.get(payload["code"])
    if message is None:
        return str(payload["code"])
    return str(message)

"""Validation contract for order requests.

Checks the shape and range of raw ``product_id`` / ``quantity`` input
before any store access.  The outcome is a ``Result``:

- ``Success(PlaceOrderDTO)`` with both fields normalized to ``int``.
- ``Failure({field: [message, ...]})`` otherwise, with stable messages::

      {"product_id": ["is missing"], "quantity": ["must be greater than 0"]}

``None`` and blank strings count as absent.  Both fields are checked
independently, so they may fail together.
"""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import ValidationError

from modules.orders.dtos import PlaceOrderDTO
from shared.domain.result import Failure, Result, Success

FIELDS = ("product_id", "quantity")

MESSAGES = {
    "missing": "is missing",
    "int_type": "must be an integer",
    "int_parsing": "must be an integer",
    "int_from_float": "must be an integer",
    "int_parsing_size": "must be an integer",
    "finite_number": "must be an integer",
}


def _is_absent(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _message_for(error: Dict[str, Any]) -> str:
    if error["type"] == "greater_than":
        return f"must be greater than {error['ctx']['gt']}"
    return MESSAGES.get(error["type"], "must be an integer")


class OrderRequestContract:
    """Pure validation of a raw order request; no side effects."""

    def call(self, **raw: Any) -> Result[PlaceOrderDTO, Dict[str, List[str]]]:
        data = {
            field: raw[field]
            for field in FIELDS
            if field in raw and not _is_absent(raw[field])
        }
        try:
            return Success(PlaceOrderDTO(**data))
        except ValidationError as exc:
            errors: Dict[str, List[str]] = {}
            for error in exc.errors():
                field = str(error["loc"][0])
                errors.setdefault(field, []).append(_message_for(error))
            return Failure(errors)

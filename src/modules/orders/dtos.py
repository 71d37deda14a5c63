"""Order DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
DTOs are immutable (``frozen=True``).

- ``PlaceOrderDTO``: normalized order request (``product_id``, ``quantity``),
  produced by ``OrderRequestContract`` once raw input passes validation.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError


class PlaceOrderDTO(BaseModel):
    """Immutable DTO for a single-item order request.

    Both fields are required integers greater than zero.  Integer-like
    strings (``"3"``) are coerced; booleans, bytes and floats with a
    fractional part are not.
    """

    model_config = ConfigDict(frozen=True)

    product_id: int = Field(gt=0)
    quantity: int = Field(gt=0)

    @field_validator("product_id", "quantity", mode="before")
    @classmethod
    def reject_booleans_and_bytes(cls, v: Any) -> Any:
        if isinstance(v, (bool, bytes, bytearray)):
            raise PydanticCustomError("int_type", "Input should be a valid integer")
        return v

"""Order domain exceptions.

Order placement reports failures as values; the exception below only
exists to abort the atomic unit so Django rolls back the writes.  It is
always caught inside ``OrderPlacementService``.
"""

from __future__ import annotations

from typing import Any


class OrderTransactionAborted(Exception):
    """A write inside the order placement transaction returned a failure."""

    def __init__(self, step: str, reason: Any) -> None:
        super().__init__(f"{step} failed: {reason}")
        self.step = step
        self.reason = reason

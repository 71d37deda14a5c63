"""Order placement constants.

Error kinds emitted by order placement and their stable codes.  The codes
double as localization keys for the presentation layer.
"""

from enum import Enum


class OrderErrorKind(str, Enum):
    VALIDATION_ERROR = "validation_error"
    INSUFFICIENT_STOCK = "insufficient_stock"
    PRODUCT_NOT_FOUND = "product_not_found"
    TRANSACTION_FAILED = "transaction_failed"


ERROR_CODES: dict[OrderErrorKind, str] = {
    OrderErrorKind.VALIDATION_ERROR: "NEW_ORDER_SERVICE_VALIDATION_ERROR",
    OrderErrorKind.INSUFFICIENT_STOCK: "NEW_ORDER_SERVICE_RUNTIME_INSUFFICIENT_STOCK",
    OrderErrorKind.PRODUCT_NOT_FOUND: "NEW_ORDER_SERVICE_RUNTIME_PRODUCT_NOT_FOUND",
    OrderErrorKind.TRANSACTION_FAILED: "NEW_ORDER_SERVICE_RUNTIME_TRANSACTION_FAILED",
}

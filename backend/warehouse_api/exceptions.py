"""Errors raised by the order operations.

The API layer maps each of these to an HTTP response in
``warehouse_api.api.error_handlers``.
"""


class WarehouseError(Exception):
    """Base exception for all warehouse errors."""

    def __init__(self, message: str, error_code: str):
        super().__init__(message)
        self.message = message
        self.error_code = error_code


class OrderNotFound(WarehouseError):
    """Raised when no order carries the requested identifier."""

    def __init__(self, order_id: str):
        super().__init__("Order not found", "ORDER_NOT_FOUND")
        self.order_id = order_id


class MalformedInput(WarehouseError):
    """Raised when a payload is missing required structure."""

    def __init__(self, message: str = "Malformed order payload"):
        super().__init__(message, "MALFORMED_INPUT")


class StorageUnavailable(WarehouseError):
    """Raised when the order file cannot be read or written."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Storage unavailable at {path}: {reason}", "STORAGE_UNAVAILABLE")
        self.path = path

from typing import Any


class OrderingError(Exception):
    ...


class InvalidArgument(OrderingError, ValueError):
    def __init__(self, field: str, value: Any, reason: str):
        super().__init__(f"Invalid {field} {value!r}: {reason}")
        self.field = field
        self.value = value


class InsufficientStock(OrderingError):
    def __init__(self, sku: str, requested: int, available: int):
        super().__init__(
            f"Insufficient stock for {sku}: requested {requested}, available {available}"
        )
        self.sku = sku
        self.requested = requested
        self.available = available

from decimal import Decimal, InvalidOperation
from typing import Any

from ..exceptions import InvalidArgument
from .bases import ValueObject

Price = Decimal | int | float | str


def to_price(value: Any) -> Decimal:
    if isinstance(value, bool):
        raise InvalidArgument("unit_price", value, "must be a number")
    if isinstance(value, Decimal):
        price = value
    elif isinstance(value, (int, str)):
        try:
            price = Decimal(value)
        except InvalidOperation:
            raise InvalidArgument("unit_price", value, "must be a number") from None
    elif isinstance(value, float):
        # str() keeps the shortest repr, so 10.1 becomes Decimal("10.1")
        price = Decimal(str(value))
    else:
        raise InvalidArgument("unit_price", value, "must be a number")
    if not price.is_finite():
        raise InvalidArgument("unit_price", value, "must be finite")
    if price < 0:
        raise InvalidArgument("unit_price", value, "must not be negative")
    return price


def check_quantity(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument("quantity", value, "must be an integer")
    if value <= 0:
        raise InvalidArgument("quantity", value, "must be positive")
    return value


def check_sku(value: Any) -> str:
    if not isinstance(value, str) or not value:
        raise InvalidArgument("sku", value, "must be a non-empty string")
    return value


class LineItem(ValueObject):
    sku: str
    quantity: int
    unit_price: Decimal

    def __post_init__(self):
        check_sku(self.sku)
        check_quantity(self.quantity)
        object.__setattr__(self, "unit_price", to_price(self.unit_price))

    def __repr__(self):
        return f"<LineItem {self.sku} x{self.quantity} @ {self.unit_price}>"

    @property
    def line_total(self) -> Decimal:
        return self.quantity * self.unit_price

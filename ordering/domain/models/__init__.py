from .line_item import LineItem
from .order import Order

__all__ = ["LineItem", "Order"]

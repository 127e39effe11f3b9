from decimal import Decimal

from .bases import Aggregate, field
from .line_item import LineItem


class Order(Aggregate):

    items: list[LineItem] = field(default_factory=list)

    def __len__(self):
        return len(self.items)

    def add(self, item: LineItem):
        self.items.append(item)

    @property
    def subtotal(self) -> Decimal:
        return sum((item.line_total for item in self.items), Decimal("0"))

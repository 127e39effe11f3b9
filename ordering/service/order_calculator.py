import asyncio
from dataclasses import dataclass
from decimal import Decimal
from typing import AsyncIterator, Optional

from loguru import logger

from ordering import port
from ordering.config import settings
from ordering.domain import exceptions, pricing
from ordering.domain.models import LineItem, Order
from ordering.domain.models.line_item import Price

CHECKED_OUT = "Checked out"


@dataclass(frozen=True, kw_only=True)
class OrderCalculatorConfig:
    inventory: Optional[port.inventory.InventoryClient] = None
    clock: Optional[port.clock.Clock] = None


async def _lookup_available(
    inventory: port.inventory.InventoryClient,
    sku: str,
    cancel: Optional[asyncio.Event],
) -> int:
    if cancel is None:
        return await inventory.get_available(sku, cancel)
    if cancel.is_set():
        raise asyncio.CancelledError(f"stock lookup for {sku} cancelled")
    lookup = asyncio.ensure_future(inventory.get_available(sku, cancel))
    cancelled = asyncio.ensure_future(cancel.wait())
    try:
        done, _ = await asyncio.wait(
            {lookup, cancelled}, return_when=asyncio.FIRST_COMPLETED
        )
    finally:
        for task in (lookup, cancelled):
            if not task.done():
                task.cancel()
    if lookup in done:
        return lookup.result()
    raise asyncio.CancelledError(f"stock lookup for {sku} cancelled")


async def _suspend(delay: float, cancel: Optional[asyncio.Event]):
    if cancel is None:
        await asyncio.sleep(delay)
        return
    if not cancel.is_set():
        try:
            await asyncio.wait_for(cancel.wait(), timeout=delay)
        except asyncio.TimeoutError:
            return
    raise asyncio.CancelledError("checkout cancelled")


class OrderCalculator:
    """Accumulates line items for one order and prices them.

    Inventory and clock capabilities are optional. Without an inventory,
    ``add_item_checked`` skips the stock check.
    """

    def __init__(self, config: Optional[OrderCalculatorConfig] = None):
        self._config = config or OrderCalculatorConfig()
        self._order = Order()

    def __len__(self):
        return len(self._order)

    @property
    def items(self) -> tuple[LineItem, ...]:
        return tuple(self._order.items)

    @property
    def clock(self) -> Optional[port.clock.Clock]:
        return self._config.clock

    def _new_item(self, sku: str, quantity: int, unit_price: Price) -> LineItem:
        try:
            return LineItem(sku=sku, quantity=quantity, unit_price=unit_price)
        except exceptions.InvalidArgument as e:
            logger.debug(f"[Invalid] {e}")
            raise

    def _append(self, item: LineItem):
        self._order.add(item)
        logger.debug(f"[Added] {item!r} (items={len(self._order)})")

    def add_item(self, sku: str, quantity: int, unit_price: Price):
        self._append(self._new_item(sku, quantity, unit_price))

    async def add_item_checked(
        self,
        sku: str,
        quantity: int,
        unit_price: Price,
        inventory: Optional[port.inventory.InventoryClient] = None,
        cancel: Optional[asyncio.Event] = None,
    ):
        """Add an item after checking stock with one inventory lookup.

        ``cancel`` only guards the lookup. When no inventory is passed or
        configured there is nothing to wait on, so the item is added even if
        ``cancel`` is already set.
        """
        item = self._new_item(sku, quantity, unit_price)
        if inventory is None:
            inventory = self._config.inventory
        if inventory is not None:
            available = await _lookup_available(inventory, item.sku, cancel)
            if item.quantity > available:
                logger.warning(
                    f"[Rejected] {item!r} requested={item.quantity} available={available}"
                )
                raise exceptions.InsufficientStock(item.sku, item.quantity, available)
        self._append(item)

    def calculate_subtotal(self) -> Decimal:
        return self._order.subtotal

    def calculate_total(self) -> Decimal:
        subtotal = self.calculate_subtotal()
        total = pricing.apply_discount(subtotal)
        logger.debug(f"[Total] subtotal={subtotal} total={total}")
        return total

    async def checkout(
        self, cancel: Optional[asyncio.Event] = None
    ) -> AsyncIterator[str]:
        # Placeholder workflow: one simulated I/O pause, then a single status.
        await _suspend(settings.CHECKOUT_DELAY_SECONDS, cancel)
        yield CHECKED_OUT

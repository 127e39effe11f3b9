import asyncio
from typing import Mapping, Optional

from loguru import logger

from ordering import port


class InMemoryInventoryClient(port.inventory.InventoryClient):
    def __init__(self, stock: Optional[Mapping[str, int]] = None):
        self._stock: dict[str, int] = dict(stock or {})
        self.lookups: list[str] = []

    def set_available(self, sku: str, qty: int):
        self._stock[sku] = qty

    async def get_available(
        self, sku: str, cancel: Optional[asyncio.Event] = None
    ) -> int:
        self.lookups.append(sku)
        available = self._stock.get(sku, 0)
        logger.debug(f"[Inventory] {sku} available={available}")
        return available

import asyncio
from typing import Optional, Protocol


class InventoryClient(Protocol):
    async def get_available(
        self, _sku: str, _cancel: Optional[asyncio.Event] = None
    ) -> int:
        ...

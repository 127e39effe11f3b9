import asyncio
from typing import Optional

import pytest
from loguru import logger

from ordering import port


class FakeInventoryClient(port.inventory.InventoryClient):
    def __init__(self, available: Optional[dict[str, int]] = None):
        self._available = available or {}
        self.calls: list[str] = []

    async def get_available(self, sku: str, cancel: Optional[asyncio.Event] = None):
        self.calls.append(sku)
        return self._available.get(sku, 0)


class BlockingInventoryClient(port.inventory.InventoryClient):
    """Never answers until ``release`` is set."""

    def __init__(self, available: int = 0):
        self.available = available
        self.release = asyncio.Event()
        self.calls: list[str] = []

    async def get_available(self, sku: str, cancel: Optional[asyncio.Event] = None):
        self.calls.append(sku)
        await self.release.wait()
        return self.available


@pytest.fixture
def fake_inventory():
    def factory(available: Optional[dict[str, int]] = None):
        return FakeInventoryClient(available)

    return factory


@pytest.fixture
def log_messages():
    messages: list[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)

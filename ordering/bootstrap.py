import sys
from functools import partial
from typing import Callable, Optional

from loguru import logger

from ordering import port
from ordering.config import settings
from ordering.service.order_calculator import OrderCalculator, OrderCalculatorConfig


def configure_logging(level: Optional[str] = None):
    logger.remove()
    logger.add(sys.stderr, level=level or settings.LOG_LEVEL)


def bootstrap(
    *,
    inventory: Optional[port.inventory.InventoryClient] = None,
    clock: Optional[port.clock.Clock] = None,
    configure_logger: bool = True,
) -> Callable[[], OrderCalculator]:

    if configure_logger:
        configure_logging()

    config = OrderCalculatorConfig(inventory=inventory, clock=clock)
    logger.debug(
        f"[Bootstrap] inventory={type(inventory).__name__ if inventory else None} "
        f"clock={type(clock).__name__ if clock else None}"
    )
    return partial(OrderCalculator, config)

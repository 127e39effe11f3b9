from decimal import Decimal
from typing import AsyncIterator

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, StreamingResponse
from pydantic import BaseModel

from ordering.adapter.clock import SystemClock
from ordering.adapter.inventory import InMemoryInventoryClient
from ordering.bootstrap import bootstrap
from ordering.config import settings
from ordering.domain import exceptions
from ordering.service.order_calculator import OrderCalculator

app = FastAPI(debug=False, version=settings.API_VERSION)
inventory = InMemoryInventoryClient(settings.INVENTORY)
calculator_factory = bootstrap(inventory=inventory, clock=SystemClock())


class LineItemRequest(BaseModel):
    sku: str
    quantity: int
    unit_price: Decimal


class OrderRequest(BaseModel):
    items: list[LineItemRequest]
    check_stock: bool = False


@app.exception_handler(exceptions.InvalidArgument)
async def invalid_argument_handler(_: Request, exc: exceptions.InvalidArgument):
    return JSONResponse(
        content={"message": str(exc)}, status_code=status.HTTP_400_BAD_REQUEST
    )


@app.exception_handler(exceptions.InsufficientStock)
async def insufficient_stock_handler(_: Request, exc: exceptions.InsufficientStock):
    return JSONResponse(
        content={"message": str(exc)}, status_code=status.HTTP_409_CONFLICT
    )


async def build_calculator(req: OrderRequest) -> OrderCalculator:
    calculator = calculator_factory()
    for item in req.items:
        if req.check_stock:
            await calculator.add_item_checked(item.sku, item.quantity, item.unit_price)
        else:
            calculator.add_item(item.sku, item.quantity, item.unit_price)
    return calculator


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.post("/quote")
async def quote(req: OrderRequest):
    calculator = await build_calculator(req)
    return JSONResponse(
        content={
            "items": len(calculator),
            "subtotal": str(calculator.calculate_subtotal()),
            "total": str(calculator.calculate_total()),
        },
        status_code=status.HTTP_200_OK,
    )


@app.post("/checkout")
async def checkout(req: OrderRequest):
    calculator = await build_calculator(req)

    async def lines() -> AsyncIterator[str]:
        async for line in calculator.checkout():
            yield f"{line}\n"

    return StreamingResponse(lines(), media_type="text/plain")

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.exceptions import ProductNotFound
from app.schemas import (
    InventoryAttributes,
    InventoryResource,
    InventoryResponse,
    InventoryUpdate,
    MessageResponse,
)
from app.services import inventory_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/inventories", tags=["inventories"])

_NOT_FOUND = {404: {"description": "Product or inventory not found"}}


def _not_found() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"error": "Product or inventory not found"},
    )


@router.get("/{product_id}", response_model=InventoryResponse, responses=_NOT_FOUND)
async def get_inventory(product_id: int, db: AsyncSession = Depends(get_db)):
    try:
        stock = await inventory_service.get_stock(db, product_id)
    except ProductNotFound as exc:
        logger.warning("%s", exc)
        return _not_found()
    return InventoryResponse(
        data=InventoryResource(
            id=str(stock.product_id),
            attributes=InventoryAttributes(
                productId=stock.product_id,
                productName=stock.product_name,
                quantity=stock.quantity,
            ),
        )
    )


@router.put("/{product_id}", response_model=MessageResponse, responses=_NOT_FOUND)
async def update_inventory(
    product_id: int, data: InventoryUpdate, db: AsyncSession = Depends(get_db)
):
    try:
        await inventory_service.set_stock(db, product_id, data.quantity)
    except ProductNotFound as exc:
        logger.warning("%s", exc)
        return _not_found()
    return MessageResponse(message="Inventory updated successfully")

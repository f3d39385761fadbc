"""
Inventory service: stock levels for existing products.

A product without an inventory row simply has a quantity of 0. Both
operations require the product itself to exist and raise
``ProductNotFound`` otherwise.
"""
import logging
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import ProductNotFound
from app.repositories import InventoryRepository, ProductRepository

logger = logging.getLogger(__name__)


@dataclass
class StockLevel:
    product_id: int
    product_name: str
    quantity: int


async def get_stock(db: AsyncSession, product_id: int) -> StockLevel:
    product = await ProductRepository(db).find_by_id(product_id)
    if product is None:
        raise ProductNotFound(product_id)

    inventory = await InventoryRepository(db).find_by_product_id(product_id)
    return StockLevel(
        product_id=product_id,
        product_name=product.name,
        quantity=inventory.quantity if inventory is not None else 0,
    )


async def set_stock(db: AsyncSession, product_id: int, quantity: int) -> None:
    if not await ProductRepository(db).exists_by_id(product_id):
        raise ProductNotFound(product_id)

    await InventoryRepository(db).set_quantity(product_id, quantity)
    logger.info("Inventory changed for product %s, new quantity: %d", product_id, quantity)

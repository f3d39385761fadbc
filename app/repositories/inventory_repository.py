"""
Inventory repository: stock counts in the ``inventories`` table, one row
per product. Writes are flushed, never committed.
"""
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import Inventory


class InventoryRepository:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def find_by_product_id(self, product_id: int) -> Inventory | None:
        return await self.db.get(Inventory, product_id)

    async def set_quantity(self, product_id: int, quantity: int) -> Inventory:
        """Update the product's stock row, inserting it on first write."""
        inventory = await self.db.get(Inventory, product_id)
        if inventory is None:
            inventory = Inventory(product_id=product_id, quantity=quantity)
            self.db.add(inventory)
        else:
            inventory.quantity = quantity
        await self.db.flush()
        return inventory

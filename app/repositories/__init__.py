from app.repositories.inventory_repository import InventoryRepository
from app.repositories.product_repository import Page, ProductRepository, SortOrder

__all__ = ["InventoryRepository", "Page", "ProductRepository", "SortOrder"]

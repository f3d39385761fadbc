"""
Product service: business rules for the Product resource.

The only rule enforced here is that update and delete target a product
that exists; everything else is handed straight to the repository.
Functions flush but never commit; the ``get_db`` dependency owns the
transaction. Database errors are not caught and reach the caller as-is.
"""
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.dependencies import PageRequest
from app.exceptions import ProductNotFound
from app.models import Product
from app.repositories import Page, ProductRepository
from app.schemas import ProductAttributes

logger = logging.getLogger(__name__)


async def create_product(db: AsyncSession, data: ProductAttributes) -> Product:
    product = await ProductRepository(db).insert(
        Product(name=data.name, price=data.price)
    )
    logger.info("Created product %s", product.id)
    return product


async def get_product(db: AsyncSession, product_id: int) -> Product | None:
    """Return the product with *product_id*, or None when there is none."""
    return await ProductRepository(db).find_by_id(product_id)


async def update_product(
    db: AsyncSession, product_id: int, data: ProductAttributes
) -> Product:
    """
    Replace the name and price of an existing product.

    The id is kept; nothing else on the row changes.

    Raises ``ProductNotFound`` when *product_id* is not in the store.
    """
    product = await ProductRepository(db).update(
        Product(id=product_id, name=data.name, price=data.price)
    )
    if product is None:
        raise ProductNotFound(product_id)
    logger.info("Updated product %s", product_id)
    return product


async def delete_product(db: AsyncSession, product_id: int) -> None:
    """Hard-delete a product. Raises ``ProductNotFound`` when it is absent."""
    repo = ProductRepository(db)
    if not await repo.exists_by_id(product_id):
        raise ProductNotFound(product_id)

    await repo.delete_by_id(product_id)
    logger.info("Deleted product %s", product_id)


async def list_products(db: AsyncSession, page_request: PageRequest) -> Page:
    return await ProductRepository(db).find_all(
        page_request.page, page_request.size, page_request.sort
    )

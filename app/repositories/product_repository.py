"""
Product repository: the store contract for the ``products`` table.

The repository only speaks SQL and holds no business rules; reporting a
missing product is the service layer's job. Ids outside the 64-bit key
range are treated as absent rather than sent to the driver. Every write
is flushed but not committed, leaving the transaction boundary to the
``get_db`` dependency.
"""
import math
from dataclasses import dataclass
from typing import Sequence

from sqlalchemy import asc, desc, exists, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import MAX_ID, Product

# Columns that may appear in a sort order; anything else is ignored.
_SORTABLE_COLUMNS: frozenset[str] = frozenset({"id", "name", "price"})


@dataclass(frozen=True)
class SortOrder:
    """One ``property,direction`` term of a sort request."""

    property: str
    direction: str = "asc"


@dataclass
class Page:
    """A slice of products plus the count metadata needed to page through them."""

    items: list[Product]
    total: int
    page: int
    size: int

    @property
    def pages(self) -> int:
        return math.ceil(self.total / self.size) if self.total > 0 else 0


def _order_by_clauses(sort: Sequence[SortOrder]) -> list:
    clauses = []
    for order in sort:
        if order.property not in _SORTABLE_COLUMNS:
            continue
        column = getattr(Product, order.property)
        clauses.append(desc(column) if order.direction == "desc" else asc(column))
    # Stable pagination needs a unique tiebreaker.
    clauses.append(asc(Product.id))
    return clauses


def _storable_id(product_id: int | None) -> bool:
    # Ids outside the column range can never have been assigned.
    return product_id is not None and 1 <= product_id <= MAX_ID


class ProductRepository:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def insert(self, product: Product) -> Product:
        """Persist *product* and return it with its generated id."""
        self.db.add(product)
        await self.db.flush()
        return product

    async def find_by_id(self, product_id: int) -> Product | None:
        if not _storable_id(product_id):
            return None
        return await self.db.get(Product, product_id)

    async def exists_by_id(self, product_id: int) -> bool:
        if not _storable_id(product_id):
            return False
        q = select(exists().where(Product.id == product_id))
        return bool((await self.db.execute(q)).scalar())

    async def delete_by_id(self, product_id: int) -> None:
        product = await self.find_by_id(product_id)
        if product is not None:
            await self.db.delete(product)
            await self.db.flush()

    async def find_all(
        self,
        page: int = 0,
        size: int = 20,
        sort: Sequence[SortOrder] = (),
    ) -> Page:
        """
        Return the *page*-th (0-based) slice of *size* products.

        Two statements are issued: a COUNT for the metadata and the
        ordered LIMIT/OFFSET SELECT for the content.
        """
        total: int = (
            await self.db.execute(select(func.count()).select_from(Product))
        ).scalar_one()

        q = (
            select(Product)
            .order_by(*_order_by_clauses(sort))
            .offset(page * size)
            .limit(size)
        )
        items = list((await self.db.execute(q)).scalars().all())
        return Page(items=items, total=total, page=page, size=size)

    async def update(self, product: Product) -> Product | None:
        """
        Replace the stored name and price of the row identified by
        ``product.id`` and return the stored product.

        Never inserts: when no such row exists nothing is written and
        None is returned.
        """
        if not _storable_id(product.id):
            return None
        result = await self.db.execute(
            update(Product)
            .where(Product.id == product.id)
            .values(name=product.name, price=product.price)
        )
        if result.rowcount == 0:
            return None
        return await self.db.get(Product, product.id)

from __future__ import annotations

from typing import Optional

from sqlalchemy import BigInteger, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base

# Largest value the 64-bit id columns can hold; no row ever has a larger id.
MAX_ID = 2**63 - 1

# Column bounds for price: NUMERIC(12, 2).
PRICE_PRECISION = 12
PRICE_SCALE = 2

# SQLite only auto-generates keys for an INTEGER PRIMARY KEY column.
_IdType = BigInteger().with_variant(Integer, "sqlite")


# ---------------------------------------------------------------------------
# Product
# ---------------------------------------------------------------------------
class Product(Base):
    __tablename__ = "products"
    # Never hand out the id of a deleted product again.
    __table_args__ = {"sqlite_autoincrement": True}

    # None until the row has been flushed and the database assigns a key.
    id: Mapped[Optional[int]] = mapped_column(_IdType, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # asdecimal=False so prices leave the ORM as floats and serialise as JSON numbers.
    price: Mapped[float] = mapped_column(
        Numeric(PRICE_PRECISION, PRICE_SCALE, asdecimal=False), nullable=False
    )

    def __repr__(self) -> str:
        return f"Product(id={self.id!r}, name={self.name!r}, price={self.price!r})"


# ---------------------------------------------------------------------------
# Inventory
# ---------------------------------------------------------------------------
class Inventory(Base):
    __tablename__ = "inventories"

    product_id: Mapped[int] = mapped_column(
        _IdType, ForeignKey("products.id", ondelete="CASCADE"), primary_key=True
    )
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:
        return f"Inventory(product_id={self.product_id!r}, quantity={self.quantity!r})"

from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.models import PRICE_PRECISION, PRICE_SCALE

# Quantities live in a 32-bit INTEGER column.
MAX_QUANTITY = 2**31 - 1


# --- Product ---

class ProductAttributes(BaseModel):
    """Client-writable product fields, as accepted in request bodies."""

    name: str = Field(max_length=255)
    # strict: JSON numbers only, no booleans or numeric strings.
    price: float = Field(strict=True, allow_inf_nan=False)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("price")
    @classmethod
    def price_fits_column(cls, value: float) -> float:
        # Reject what NUMERIC(12, 2) would round or overflow, so the stored
        # price is always the one the client sent.
        digits = Decimal(repr(value))
        if digits.as_tuple().exponent < -PRICE_SCALE:
            raise ValueError(f"must have at most {PRICE_SCALE} decimal places")
        if abs(digits) >= Decimal(10) ** (PRICE_PRECISION - PRICE_SCALE):
            raise ValueError(
                f"must have at most {PRICE_PRECISION - PRICE_SCALE} digits before the decimal point"
            )
        return value


class ProductView(BaseModel):
    """Product fields as rendered in responses; whatever is stored is shown."""

    name: str
    price: float
    model_config = ConfigDict(from_attributes=True)


# --- Envelope ---

class ResourceObject(BaseModel):
    id: str
    type: Literal["products"] = "products"
    attributes: ProductView


class JsonApiResponse(BaseModel):
    """
    Response envelope: exactly one of ``data`` / ``dataList`` is set and
    the unset one is dropped from the JSON output.

    ``dataList`` wraps the page content in one more list, matching the
    shape existing clients of the list endpoint already parse.
    """

    data: ResourceObject | None = None
    dataList: list[list[ResourceObject]] | None = None


# --- Inventory ---

class InventoryUpdate(BaseModel):
    quantity: int = Field(strict=True, ge=0, le=MAX_QUANTITY)


class InventoryAttributes(BaseModel):
    productId: int
    productName: str
    quantity: int


class InventoryResource(BaseModel):
    type: Literal["inventories"] = "inventories"
    id: str
    attributes: InventoryAttributes


class InventoryResponse(BaseModel):
    data: InventoryResource


class MessageResponse(BaseModel):
    message: str


# --- Errors ---

class FieldError(BaseModel):
    field: str
    message: str


class ErrorResponse(BaseModel):
    errors: list[FieldError]

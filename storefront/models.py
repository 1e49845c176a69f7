"""Shop API models - Pydantic schemas for what the backend sends and receives."""
from decimal import Decimal, InvalidOperation

from pydantic import BaseModel, ConfigDict, Field, field_validator

from storefront.services.money import to_decimal


class Product(BaseModel):
    """Catalog product. Immutable for the lifetime of a page session."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int
    name: str
    price: str  # decimal encoded as string, e.g. "9.99"
    description: str = ""
    stock: int = 0

    @field_validator("price", mode="before")
    @classmethod
    def price_as_string(cls, v):
        if isinstance(v, bool):
            raise ValueError("price must be a decimal number")
        if isinstance(v, (int, float, Decimal)):
            v = str(v)
        if not isinstance(v, str):
            raise ValueError("price must be a decimal string")
        try:
            parsed = Decimal(v.strip())
        except InvalidOperation:
            raise ValueError(f"invalid price: {v!r}")
        if not parsed.is_finite() or parsed < 0:
            raise ValueError(f"invalid price: {v!r}")
        if parsed.adjusted() > 15:
            raise ValueError(f"price out of range: {v!r}")
        return v

    @property
    def unit_price(self) -> Decimal:
        return to_decimal(self.price)


class OrderLine(BaseModel):
    product_id: int
    quantity: int
    price: float


class OrderPayload(BaseModel):
    """Body of POST /api/order. Field names follow the backend's camelCase."""
    model_config = ConfigDict(populate_by_name=True)

    customer_name: str = Field(alias="customerName")
    delivery_address: str = Field(alias="deliveryAddress")
    items: list[OrderLine]
    total: str  # two-decimal formatted

    def to_request_body(self) -> dict:
        return self.model_dump(by_alias=True)

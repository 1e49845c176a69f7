"""Cart models with Decimal-based pricing."""
from dataclasses import dataclass
from decimal import Decimal

from storefront.models import Product
from storefront.services.money import multiply


@dataclass
class CartItem:
    """A product in the cart with its quantity (always >= 1)."""
    product: Product
    quantity: int = 1

    @property
    def product_id(self) -> int:
        return self.product.id

    @property
    def unit_price(self) -> Decimal:
        """Price parsed from the product's string representation."""
        return self.product.unit_price

    @property
    def total_price(self) -> Decimal:
        return multiply(self.unit_price, self.quantity)

    def to_dict(self) -> dict:
        """Snapshot form: product fields flattened with quantity."""
        return {**self.product.model_dump(), "quantity": self.quantity}

    @classmethod
    def from_dict(cls, data: dict) -> "CartItem":
        """Create from a storage snapshot entry."""
        quantity = data["quantity"]
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise ValueError(f"Invalid quantity in snapshot: {quantity!r}")
        if quantity < 1:
            raise ValueError(f"Invalid quantity in snapshot: {quantity}")
        product_fields = {k: v for k, v in data.items() if k != "quantity"}
        return cls(product=Product.model_validate(product_fields), quantity=quantity)

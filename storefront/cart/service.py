"""Cart manager: in-memory cart with write-through local persistence."""
import json
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from pydantic import ValidationError

from storefront.config import CART_STORAGE_KEY
from storefront.errors import (
    ERROR_ORDER_FAILED,
    EmptyCartError,
    OrderInProgressError,
    ShopAPIError,
)
from storefront.logging import get_logger, sanitize_string_for_logging
from storefront.models import OrderLine, OrderPayload, Product
from storefront.services.money import format_amount, to_float
from storefront.services.shop_api import ShopAPIClient
from .models import CartItem
from .storage import LocalStorage, MemoryStorage

logger = get_logger(__name__)


@dataclass
class OrderResult:
    """Outcome of an order submission."""
    success: bool
    total: str = "0.00"
    status_code: Optional[int] = None
    error: Optional[str] = None


class CartManager:
    """
    Owns the shopper's cart.

    Every mutation replaces the item list and persists a JSON snapshot under
    the "cart" storage key. The snapshot is read back once by `load()`.
    At most one CartItem exists per product id; quantities never drop below 1.
    """

    def __init__(self, storage: LocalStorage | MemoryStorage, api: ShopAPIClient):
        self._storage = storage
        self._api = api
        self._items: list[CartItem] = []
        self._submitting = False

    @property
    def items(self) -> tuple[CartItem, ...]:
        return tuple(self._items)

    @property
    def count(self) -> int:
        """Number of distinct products in the cart."""
        return len(self._items)

    @property
    def is_empty(self) -> bool:
        return not self._items

    @property
    def is_submitting(self) -> bool:
        return self._submitting

    def get_item(self, product_id: int) -> Optional[CartItem]:
        return next((item for item in self._items if item.product_id == product_id), None)

    def load(self) -> tuple[CartItem, ...]:
        """Replace the in-memory cart with the stored snapshot, if any."""
        raw = self._storage.get_item(CART_STORAGE_KEY)
        if not raw:
            return self.items

        try:
            data = json.loads(raw)
            items = [CartItem.from_dict(entry) for entry in data]
        except (json.JSONDecodeError, KeyError, TypeError, ValueError, ValidationError) as e:
            # Corrupted snapshot - treat as no saved cart
            logger.warning(f"Ignoring corrupted cart snapshot: {e}")
            return self.items

        # Keep the first occurrence of each product id
        seen: set[int] = set()
        self._items = []
        for item in items:
            if item.product_id not in seen:
                seen.add(item.product_id)
                self._items.append(item)
        logger.info("Restored cart with %d items", len(self._items))
        return self.items

    def _save(self, items: list[CartItem]) -> None:
        self._items = items
        self._storage.set_item(
            CART_STORAGE_KEY,
            json.dumps([item.to_dict() for item in items], ensure_ascii=False),
        )

    def add_to_cart(self, product: Product) -> CartItem:
        """Add one unit of product; existing lines are incremented by 1."""
        existing = self.get_item(product.id)
        if existing:
            updated = [
                CartItem(item.product, item.quantity + 1) if item.product_id == product.id else item
                for item in self._items
            ]
        else:
            updated = [*self._items, CartItem(product=product, quantity=1)]

        self._save(updated)
        return self.get_item(product.id)

    def update_quantity(self, product_id: int, quantity: int) -> bool:
        """
        Set the quantity of a cart line.

        Returns False (and changes nothing) when quantity < 1.
        An unknown product id leaves the cart as it is.
        """
        if quantity < 1:
            return False

        updated = [
            CartItem(item.product, quantity) if item.product_id == product_id else item
            for item in self._items
        ]
        self._save(updated)
        return True

    def remove_from_cart(self, product_id: int) -> None:
        """Remove a cart line; no-op if it isn't there."""
        updated = [item for item in self._items if item.product_id != product_id]
        self._save(updated)

    def compute_total(self) -> Decimal:
        """Sum of unit price x quantity; 0 for an empty cart."""
        return sum((item.total_price for item in self._items), Decimal("0"))

    def clear(self) -> None:
        """Drop every item and remove the stored snapshot."""
        self._items = []
        self._storage.remove_item(CART_STORAGE_KEY)

    def build_order(self, customer_name: str, delivery_address: str) -> OrderPayload:
        """Build the order body from the current cart."""
        return OrderPayload(
            customer_name=customer_name,
            delivery_address=delivery_address,
            items=[
                OrderLine(
                    product_id=item.product_id,
                    quantity=item.quantity,
                    price=to_float(item.unit_price),
                )
                for item in self._items
            ],
            total=format_amount(self.compute_total()),
        )

    async def place_order(self, customer_name: str, delivery_address: str) -> OrderResult:
        """
        Submit the cart as an order.

        On HTTP 201 the cart and its snapshot are cleared. Any other outcome
        leaves cart and storage exactly as they were.

        Raises:
            EmptyCartError: nothing to order
            OrderInProgressError: a previous submission has not finished
        """
        if self.is_empty:
            raise EmptyCartError()
        if self._submitting:
            raise OrderInProgressError()

        order = self.build_order(customer_name, delivery_address)
        self._submitting = True
        try:
            logger.info(
                "Submitting order: customer=%s, items=%d, total=%s",
                sanitize_string_for_logging(customer_name),
                len(order.items),
                order.total,
            )
            response = await self._api.create_order(order.to_request_body())
        except ShopAPIError as e:
            logger.error(f"Order submission failed: {e}")
            return OrderResult(
                success=False,
                total=order.total,
                status_code=getattr(e, "status_code", None),
                error=ERROR_ORDER_FAILED,
            )
        finally:
            self._submitting = False

        self.clear()
        return OrderResult(success=True, total=order.total, status_code=response.status_code)

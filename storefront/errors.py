"""
Storefront errors.

Message constants shared by the API surface and the CLI, plus the exception
hierarchy raised by the shop API client and the checkout flow.
"""

# Product errors
ERROR_PRODUCT_NOT_FOUND = "Product not found"

# Cart errors
ERROR_CART_EMPTY = "Cart is empty"
ERROR_INVALID_QUANTITY = "Quantity must be at least 1"
ERROR_CART_ITEM_NOT_FOUND = "Product is not in the cart"

# Order errors
ERROR_ORDER_FAILED = "Помилка при створенні замовлення"
ERROR_ORDER_IN_PROGRESS = "Order submission already in progress"
ERROR_PAYMENT_DECLINED = "Оплата не пройшла"

# Shop API errors
ERROR_SHOP_UNAVAILABLE = "Shop API is unavailable"
ERROR_SHOP_BAD_RESPONSE = "Unexpected response from shop API"

# User-facing success notice
ORDER_SUCCESS_MESSAGE = "Замовлення успішно оформлено!"


class ShopAPIError(Exception):
    """Base error for shop backend calls."""


class ShopAPIUnavailable(ShopAPIError):
    """Transport failure: the request never got a response."""


class ShopAPIStatusError(ShopAPIError):
    """The backend answered with a status we don't accept."""

    def __init__(self, status_code: int, detail: str = ""):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"Shop API returned {status_code}: {detail}" if detail else f"Shop API returned {status_code}")


class CheckoutError(Exception):
    """Checkout refused before any network call."""


class EmptyCartError(CheckoutError):
    def __init__(self):
        super().__init__(ERROR_CART_EMPTY)


class OrderInProgressError(CheckoutError):
    def __init__(self):
        super().__init__(ERROR_ORDER_IN_PROGRESS)

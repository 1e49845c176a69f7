"""Order checkout flow."""
from .checkout import Checkout, CheckoutState, OrderForm

__all__ = ["Checkout", "CheckoutState", "OrderForm"]

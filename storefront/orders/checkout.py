"""
Checkout flow: the order form and the payment confirmation gate.

    IDLE -> CONFIRMING -> SUBMITTING -> SUCCESS
                 |              |
                 +-> IDLE <-----+ (declined / failed)

Confirmation is synchronous and happens before any network call; declining
leaves everything untouched.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from storefront.cart import CartManager, OrderResult
from storefront.config import CURRENCY_LABEL
from storefront.errors import (
    ERROR_ORDER_FAILED,
    ERROR_PAYMENT_DECLINED,
    ORDER_SUCCESS_MESSAGE,
    EmptyCartError,
    OrderInProgressError,
)
from storefront.logging import get_logger
from storefront.services.money import format_amount

logger = get_logger(__name__)

Confirm = Callable[[str], bool]
Notify = Callable[[str], None]


class CheckoutState(str, Enum):
    IDLE = "idle"
    CONFIRMING = "confirming"
    SUBMITTING = "submitting"
    SUCCESS = "success"


@dataclass
class OrderForm:
    customer_name: str = ""
    delivery_address: str = ""
    visible: bool = False

    def clear(self) -> None:
        self.customer_name = ""
        self.delivery_address = ""
        self.visible = False


def _log_notice(message: str) -> None:
    logger.info("Notice: %s", message)


class Checkout:
    """Drives one order submission at a time for a cart."""

    def __init__(self, cart: CartManager, notify: Optional[Notify] = None):
        self.cart = cart
        self.form = OrderForm()
        self._state = CheckoutState.IDLE
        self._notify = notify or _log_notice

    @property
    def state(self) -> CheckoutState:
        # A finished order stops counting once the shopper starts a new cart
        if self._state == CheckoutState.SUCCESS and not self.cart.is_empty:
            self._state = CheckoutState.IDLE
        return self._state

    @state.setter
    def state(self, value: CheckoutState) -> None:
        self._state = value

    def open_form(self) -> None:
        if self.cart.is_empty:
            raise EmptyCartError()
        self.form.visible = True

    def update_form(
        self,
        customer_name: Optional[str] = None,
        delivery_address: Optional[str] = None,
    ) -> OrderForm:
        if customer_name is not None:
            self.form.customer_name = customer_name
        if delivery_address is not None:
            self.form.delivery_address = delivery_address
        return self.form

    def confirmation_prompt(self) -> str:
        total = format_amount(self.cart.compute_total())
        return f"Симуляція оплати: підтвердьте оплату {total} {CURRENCY_LABEL}"

    async def pay(self, confirm: Confirm) -> OrderResult:
        """
        Ask for confirmation, then submit the order.

        Raises:
            EmptyCartError: the cart has nothing to order
            OrderInProgressError: a submission is already running
        """
        if self.state in (CheckoutState.CONFIRMING, CheckoutState.SUBMITTING):
            raise OrderInProgressError()
        if self.cart.is_empty:
            raise EmptyCartError()

        self.state = CheckoutState.CONFIRMING
        prompt = self.confirmation_prompt()
        try:
            confirmed = confirm(prompt)
        except BaseException:
            self.state = CheckoutState.IDLE
            raise
        if not confirmed:
            self.state = CheckoutState.IDLE
            self._notify(ERROR_PAYMENT_DECLINED)
            return OrderResult(
                success=False,
                total=format_amount(self.cart.compute_total()),
                error=ERROR_PAYMENT_DECLINED,
            )

        self.state = CheckoutState.SUBMITTING
        try:
            result = await self.cart.place_order(
                self.form.customer_name,
                self.form.delivery_address,
            )
        except Exception:
            self.state = CheckoutState.IDLE
            raise

        if result.success:
            self.state = CheckoutState.SUCCESS
            self.form.clear()
            self._notify(ORDER_SUCCESS_MESSAGE)
        else:
            self.state = CheckoutState.IDLE
            self._notify(result.error or ERROR_ORDER_FAILED)
        return result

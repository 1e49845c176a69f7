"""
Checkout Router

Order form and simulated payment. The shopper's confirmation travels in the
request body; without it no order is sent.
"""
from fastapi import APIRouter, Depends, HTTPException

from storefront.errors import (
    ERROR_PAYMENT_DECLINED,
    EmptyCartError,
    OrderInProgressError,
)
from storefront.logging import get_logger
from storefront.orders import Checkout
from storefront.session import StorefrontSession
from .cart import format_cart_response
from .deps import get_storefront_session
from .models import OrderFormRequest, PayRequest

logger = get_logger(__name__)

router = APIRouter(tags=["store-checkout"])


def _format_checkout_response(checkout: Checkout) -> dict:
    return {
        "state": checkout.state.value,
        "form": {
            "customer_name": checkout.form.customer_name,
            "delivery_address": checkout.form.delivery_address,
            "visible": checkout.form.visible,
        },
        "confirmation_prompt": None if checkout.cart.is_empty else checkout.confirmation_prompt(),
    }


@router.get("/checkout")
async def get_checkout(session: StorefrontSession = Depends(get_storefront_session)):
    return _format_checkout_response(session.checkout)


@router.put("/checkout/form")
async def update_order_form(request: OrderFormRequest, session: StorefrontSession = Depends(get_storefront_session)):
    """Open the order form and store customer details."""
    try:
        session.checkout.open_form()
    except EmptyCartError as e:
        raise HTTPException(status_code=400, detail=str(e))

    session.checkout.update_form(
        customer_name=request.customer_name,
        delivery_address=request.delivery_address,
    )
    return _format_checkout_response(session.checkout)


@router.post("/checkout")
async def pay(request: PayRequest, session: StorefrontSession = Depends(get_storefront_session)):
    """Run the simulated payment and submit the order."""
    try:
        result = await session.checkout.pay(lambda _prompt: request.confirm)
    except EmptyCartError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except OrderInProgressError as e:
        raise HTTPException(status_code=409, detail=str(e))

    if not result.success:
        if result.error == ERROR_PAYMENT_DECLINED:
            raise HTTPException(status_code=402, detail=result.error)
        raise HTTPException(status_code=502, detail=result.error)

    return {
        "success": True,
        "total": result.total,
        "cart": format_cart_response(session.cart),
        "checkout": _format_checkout_response(session.checkout),
    }

"""
Cart Router

Shopping cart endpoints. Every mutation is written through to local storage
by the CartManager before the response is built.
"""
from fastapi import APIRouter, Depends, HTTPException

from storefront.cart import CartManager
from storefront.errors import (
    ERROR_CART_ITEM_NOT_FOUND,
    ERROR_INVALID_QUANTITY,
    ERROR_PRODUCT_NOT_FOUND,
)
from storefront.logging import get_logger
from storefront.services.money import format_amount, format_money, to_float
from storefront.session import StorefrontSession
from .deps import get_storefront_session
from .models import AddToCartRequest, UpdateCartItemRequest

logger = get_logger(__name__)

router = APIRouter(tags=["store-cart"])


def format_cart_response(cart: CartManager) -> dict:
    """Build the cart payload: lines, count badge, and total."""
    total = cart.compute_total()
    return {
        "items": [
            {
                "product_id": item.product_id,
                "name": item.product.name,
                "price": item.product.price,
                "quantity": item.quantity,
                "line_total": to_float(item.total_price),
            }
            for item in cart.items
        ],
        "count": cart.count,
        "is_empty": cart.is_empty,
        "total": format_amount(total),
        "display_total": format_money(total),
    }


@router.get("/cart")
async def get_cart(session: StorefrontSession = Depends(get_storefront_session)):
    return format_cart_response(session.cart)


@router.post("/cart/items")
async def add_to_cart(request: AddToCartRequest, session: StorefrontSession = Depends(get_storefront_session)):
    """Add one unit of a catalog product."""
    product = session.catalog.get(request.product_id)
    if not product:
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)

    session.cart.add_to_cart(product)
    return format_cart_response(session.cart)


@router.patch("/cart/items/{product_id}")
async def update_cart_item(
    product_id: int,
    request: UpdateCartItemRequest,
    session: StorefrontSession = Depends(get_storefront_session),
):
    """Set a line's quantity (minimum 1)."""
    if session.cart.get_item(product_id) is None:
        raise HTTPException(status_code=404, detail=ERROR_CART_ITEM_NOT_FOUND)
    if not session.cart.update_quantity(product_id, request.quantity):
        raise HTTPException(status_code=400, detail=ERROR_INVALID_QUANTITY)
    return format_cart_response(session.cart)


@router.delete("/cart/items/{product_id}")
async def remove_cart_item(product_id: int, session: StorefrontSession = Depends(get_storefront_session)):
    session.cart.remove_from_cart(product_id)
    return format_cart_response(session.cart)

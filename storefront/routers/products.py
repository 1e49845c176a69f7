"""
Products Router

Serves the catalog loaded at startup. No refetch per request.
"""
from fastapi import APIRouter, Depends, HTTPException

from storefront.errors import ERROR_PRODUCT_NOT_FOUND
from storefront.services.money import format_money
from storefront.session import StorefrontSession
from .deps import get_storefront_session

router = APIRouter(tags=["store-products"])


def _format_product(product) -> dict:
    return {
        **product.model_dump(),
        "display_price": format_money(product.price),
    }


@router.get("/products")
async def list_products(session: StorefrontSession = Depends(get_storefront_session)):
    """List the catalog (empty if the shop API failed at startup)."""
    products = session.catalog.products
    return {"products": [_format_product(p) for p in products], "count": len(products)}


@router.get("/products/{product_id}")
async def get_product(product_id: int, session: StorefrontSession = Depends(get_storefront_session)):
    product = session.catalog.get(product_id)
    if not product:
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)
    return _format_product(product)

"""Storefront API Router.

Combines the catalog, cart and checkout sub-routers under /api/store.
"""

from fastapi import APIRouter

from .cart import router as cart_router
from .checkout import router as checkout_router
from .products import router as products_router

router = APIRouter(prefix="/api/store", tags=["store"])

router.include_router(products_router)
router.include_router(cart_router)
router.include_router(checkout_router)

__all__ = ["router"]

"""
Storefront session - one page session's worth of state.

Bootstraps the catalog and the saved cart, and hands the pieces to whichever
surface (HTTP API or terminal) is driving the store.
"""
from pathlib import Path
from typing import Optional

from storefront.cart import CartManager, LocalStorage, MemoryStorage
from storefront.catalog import CatalogLoader
from storefront.logging import get_logger
from storefront.orders import Checkout
from storefront.orders.checkout import Notify
from storefront.services.shop_api import ShopAPIClient, get_shop_api_client

logger = get_logger(__name__)


class StorefrontSession:
    def __init__(
        self,
        api: Optional[ShopAPIClient] = None,
        storage: LocalStorage | MemoryStorage | None = None,
        notify: Optional[Notify] = None,
    ):
        self.api = api or get_shop_api_client()
        self.storage = storage if storage is not None else LocalStorage()
        self.catalog = CatalogLoader(self.api)
        self.cart = CartManager(self.storage, self.api)
        self.checkout = Checkout(self.cart, notify=notify)

    async def start(self) -> None:
        """Load the saved cart, then fetch the catalog."""
        self.cart.load()
        await self.catalog.load()

    async def close(self) -> None:
        await self.api.close()


_session: Optional[StorefrontSession] = None


def get_session() -> StorefrontSession:
    """Get StorefrontSession singleton."""
    global _session
    if _session is None:
        _session = StorefrontSession()
    return _session


def reset_session(session: Optional[StorefrontSession] = None) -> None:
    """Replace the singleton (used on shutdown and in tests)."""
    global _session
    _session = session

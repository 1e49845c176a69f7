"""Catalog Loader - fetches the product list once per session."""
from typing import Optional

from pydantic import ValidationError

from storefront.errors import ShopAPIError
from storefront.logging import get_logger
from storefront.models import Product
from storefront.services.shop_api import ShopAPIClient

logger = get_logger(__name__)


class CatalogLoader:
    """
    Read-only product catalog.

    `load()` issues a single GET; on any failure the error is logged and the
    catalog stays empty. There is no retry and no user-facing error state.
    """

    def __init__(self, api: ShopAPIClient):
        self._api = api
        self._products: tuple[Product, ...] = ()

    @property
    def products(self) -> tuple[Product, ...]:
        return self._products

    def get(self, product_id: int) -> Optional[Product]:
        return next((p for p in self._products if p.id == product_id), None)

    async def load(self) -> tuple[Product, ...]:
        """Fetch products from the shop API, replacing the current collection."""
        try:
            raw = await self._api.fetch_products()
            self._products = tuple(Product.model_validate(p) for p in raw)
        except (ShopAPIError, ValidationError):
            logger.exception("Failed to load products")
            self._products = ()
            return self._products

        logger.info("Loaded %d products", len(self._products))
        return self._products

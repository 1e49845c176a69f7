"""Shop API client - the two backend calls (list products, create order).

Requests carry the client's cookie jar (the credentialed mode the browser
storefront used). No retries and no timeouts are applied here.
"""

from typing import Any, Optional

import httpx

from storefront.config import (
    ORDER_CREATED_STATUS,
    ORDER_ENDPOINT,
    PRODUCTS_ENDPOINT,
    SHOP_API_URL,
)
from storefront.errors import (
    ERROR_SHOP_BAD_RESPONSE,
    ERROR_SHOP_UNAVAILABLE,
    ShopAPIError,
    ShopAPIStatusError,
    ShopAPIUnavailable,
)
from storefront.logging import get_logger

logger = get_logger(__name__)


class ShopAPIClient:
    """Async client for the shop backend."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        cookies: Optional[dict[str, str]] = None,
    ):
        self.base_url = (base_url or SHOP_API_URL).rstrip("/")
        self._transport = transport
        self._cookies = httpx.Cookies(cookies or {})
        self._http_client: httpx.AsyncClient | None = None

    async def _get_http_client(self) -> httpx.AsyncClient:
        """Lazy creation of shared httpx client."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                base_url=self.base_url,
                cookies=self._cookies,
                timeout=httpx.Timeout(None),
                transport=self._transport,
            )
        return self._http_client

    async def close(self) -> None:
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        client = await self._get_http_client()
        try:
            return await client.request(method, path, **kwargs)
        except httpx.RequestError as e:
            raise ShopAPIUnavailable(f"{ERROR_SHOP_UNAVAILABLE}: {method} {path}: {e!s}") from e

    async def fetch_products(self) -> list[dict[str, Any]]:
        """GET /api/products and return the raw `products` list ([] if absent)."""
        response = await self._request("GET", PRODUCTS_ENDPOINT)
        if response.is_error:
            raise ShopAPIStatusError(response.status_code, response.text[:200])

        try:
            data = response.json()
        except ValueError as e:
            raise ShopAPIError(ERROR_SHOP_BAD_RESPONSE) from e

        if not isinstance(data, dict):
            raise ShopAPIError(ERROR_SHOP_BAD_RESPONSE)
        products = data.get("products") or []
        if not isinstance(products, list):
            raise ShopAPIError(ERROR_SHOP_BAD_RESPONSE)
        return products

    async def create_order(self, body: dict[str, Any]) -> httpx.Response:
        """POST /api/order. Only 201 counts as accepted."""
        response = await self._request("POST", ORDER_ENDPOINT, json=body)
        if response.status_code != ORDER_CREATED_STATUS:
            raise ShopAPIStatusError(response.status_code, response.text[:200])
        logger.info("Order accepted by shop API")
        return response


_shop_api_client: Optional[ShopAPIClient] = None


def get_shop_api_client() -> ShopAPIClient:
    """Get ShopAPIClient singleton."""
    global _shop_api_client
    if _shop_api_client is None:
        _shop_api_client = ShopAPIClient()
    return _shop_api_client

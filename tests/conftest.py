"""Pytest configuration and fixtures"""
import json
import os
import tempfile
from typing import Callable

import httpx
import pytest

# Set test environment variables before storefront.config is imported
os.environ.setdefault("SHOP_API_URL", "http://shop.test")
os.environ.setdefault(
    "STOREFRONT_STORAGE_PATH",
    os.path.join(tempfile.gettempdir(), "proto-store-tests", "storage.json"),
)
os.environ.setdefault("CURRENCY_LABEL", "грн")

from storefront.cart import CartManager, MemoryStorage  # noqa: E402
from storefront.models import Product  # noqa: E402
from storefront.services.shop_api import ShopAPIClient  # noqa: E402


class FakeShop:
    """Scriptable shop backend behind an httpx.MockTransport."""

    def __init__(self):
        self.products: list[dict] = []
        self.products_status = 200
        self.products_body: object | None = None
        self.order_status = 201
        self.connect_error: str | None = None
        self.requests: list[httpx.Request] = []

    @property
    def orders(self) -> list[dict]:
        return [
            json.loads(r.content)
            for r in self.requests
            if r.method == "POST" and r.url.path == "/api/order"
        ]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.connect_error is not None:
            raise httpx.ConnectError(self.connect_error, request=request)
        if request.method == "GET" and request.url.path == "/api/products":
            body = self.products_body if self.products_body is not None else {"products": self.products}
            return httpx.Response(self.products_status, json=body)
        if request.method == "POST" and request.url.path == "/api/order":
            return httpx.Response(self.order_status, json={"ok": self.order_status == 201})
        return httpx.Response(404, json={"error": "not found"})


@pytest.fixture
def sample_products() -> list[dict]:
    """Catalog as the shop API returns it"""
    return [
        {"id": 1, "name": "Coffee beans", "price": "9.99", "description": "Arabica 250g", "stock": 12},
        {"id": 2, "name": "Paper filters", "price": "4.00", "description": "Pack of 100", "stock": 40},
        {"id": 3, "name": "Grinder", "price": "10.00", "description": "Hand grinder", "stock": 3},
        {"id": 4, "name": "Mug", "price": "5.50", "description": "Ceramic, 300ml", "stock": 0},
    ]


@pytest.fixture
def products(sample_products) -> dict[int, Product]:
    return {p["id"]: Product.model_validate(p) for p in sample_products}


@pytest.fixture
def fake_shop(sample_products) -> FakeShop:
    shop = FakeShop()
    shop.products = sample_products
    return shop


@pytest.fixture
def api(fake_shop) -> ShopAPIClient:
    return ShopAPIClient(
        base_url="http://shop.test",
        transport=httpx.MockTransport(fake_shop.handler),
        cookies={"session": "abc"},
    )


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def cart(storage, api) -> CartManager:
    return CartManager(storage, api)


@pytest.fixture
def make_confirm() -> Callable[[bool], Callable[[str], bool]]:
    """Build a confirm() callable that records prompts and answers `answer`."""
    def _make(answer: bool):
        def confirm(prompt: str) -> bool:
            confirm.prompts.append(prompt)
            return answer
        confirm.prompts = []
        return confirm
    return _make

# Services Module
from .shop_api import ShopAPIClient, get_shop_api_client

__all__ = ["ShopAPIClient", "get_shop_api_client"]

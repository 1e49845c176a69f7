"""
Storefront configuration.

All settings come from environment variables (optionally loaded from a local
.env file). Only the API base URL changes runtime behaviour; the rest are
local conveniences.
"""
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


# Shop backend (the external collaborator)
SHOP_API_URL = os.environ.get("SHOP_API_URL", "http://localhost:5000").rstrip("/")

# Local durable storage (the browser localStorage analogue)
STOREFRONT_STORAGE_PATH = Path(
    os.environ.get(
        "STOREFRONT_STORAGE_PATH",
        str(Path.home() / ".proto-store" / "storage.json"),
    )
).expanduser()

# Label printed next to prices
CURRENCY_LABEL = os.environ.get("CURRENCY_LABEL", "грн")

# Storage key holding the cart snapshot
CART_STORAGE_KEY = "cart"

# Backend endpoints, relative to SHOP_API_URL
PRODUCTS_ENDPOINT = "/api/products"
ORDER_ENDPOINT = "/api/order"

# Status the backend returns for a created order
ORDER_CREATED_STATUS = 201

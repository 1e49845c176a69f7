"""Cart package: models, storage, and manager."""
from .models import CartItem
from .service import CartManager, OrderResult
from .storage import LocalStorage, MemoryStorage

__all__ = [
    "CartItem",
    "CartManager",
    "OrderResult",
    "LocalStorage",
    "MemoryStorage",
]

"""
Storefront API Pydantic Models

Request bodies for the local storefront endpoints.
"""
from typing import Optional
from pydantic import BaseModel, Field


# ==================== CART MODELS ====================

class AddToCartRequest(BaseModel):
    product_id: int


class UpdateCartItemRequest(BaseModel):
    quantity: int


# ==================== CHECKOUT MODELS ====================

class OrderFormRequest(BaseModel):
    customer_name: Optional[str] = None
    delivery_address: Optional[str] = None


class PayRequest(BaseModel):
    confirm: bool = Field(False, description="Shopper confirmed the simulated charge")

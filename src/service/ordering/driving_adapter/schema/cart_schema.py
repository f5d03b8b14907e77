from typing import List

from pydantic import BaseModel, Field


class MenuItemResponse(BaseModel):
    id: str
    name: str
    description: str
    price: float
    category: str


class CartItemResponse(BaseModel):
    menu_item: MenuItemResponse
    quantity: int
    subtotal: float


class CartResponse(BaseModel):
    items: List[CartItemResponse]
    total: float
    count: int


class AddCartItemRequest(BaseModel):
    item_id: str
    quantity: int = Field(default=1, ge=1, le=99)

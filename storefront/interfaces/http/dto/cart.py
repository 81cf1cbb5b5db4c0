from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class AddItemRequestDTO(BaseModel):
    product_id: int = Field(ge=1)
    quantity: int


class CartItemDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    product_id: int
    quantity: int
    product_name: str
    unit_price: Decimal
    total_price: Decimal


class CartDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    items: list[CartItemDTO]
    total: Decimal
    item_count: int

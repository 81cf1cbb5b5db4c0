# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass, field, replace
from decimal import Decimal

from storefront.domain.catalog.entities import Product
from storefront.domain.exceptions import InvariantViolation


@dataclass(slots=True, frozen=True)
class CartItem:
    """A cart line holding a price-locked copy of the product's name and price.

    Later catalog changes never touch an item once it is in a cart.
    """

    product_id: int
    quantity: int
    product_name: str
    unit_price: Decimal

    def __post_init__(self) -> None:
        if self.quantity <= 0:
            raise InvariantViolation("quantity must be positive", field="quantity")

    @classmethod
    def snapshot_of(cls, product: Product, quantity: int) -> CartItem:
        return cls(
            product_id=product.id,
            quantity=quantity,
            product_name=product.name,
            unit_price=product.price,
        )

    @property
    def total_price(self) -> Decimal:
        return self.unit_price * self.quantity

    def with_added(self, quantity: int) -> CartItem:
        return replace(self, quantity=self.quantity + quantity)


@dataclass(slots=True)
class Cart:
    id: int
    user_id: int
    items: list[CartItem] = field(default_factory=list)

    @property
    def total(self) -> Decimal:
        return sum((item.total_price for item in self.items), Decimal("0"))

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)

    def find(self, product_id: int) -> CartItem | None:
        for item in self.items:
            if item.product_id == product_id:
                return item
        return None

    def add(self, product: Product, quantity: int) -> None:
        """Merge ``quantity`` of ``product`` into the cart, one line per product."""

        if quantity <= 0:
            raise InvariantViolation("quantity must be positive", field="quantity")
        for idx, item in enumerate(self.items):
            if item.product_id == product.id:
                self.items[idx] = item.with_added(quantity)
                return
        self.items.append(CartItem.snapshot_of(product, quantity))

    def remove(self, product_id: int) -> None:
        self.items = [item for item in self.items if item.product_id != product_id]

    def clear(self) -> None:
        self.items.clear()

    def snapshot(self) -> Cart:
        return Cart(id=self.id, user_id=self.user_id, items=list(self.items))

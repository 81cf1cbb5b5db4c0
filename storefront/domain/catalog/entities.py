# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Catalog entities: products, the shape used to create them, and filters."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from storefront.domain.exceptions import InvariantViolation

NAME_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 5000


def _validate_product_fields(
    name: str, description: str, price: Decimal, inventory_count: int
) -> None:
    if not name.strip():
        raise InvariantViolation("name must not be blank", field="name")
    if len(name) > NAME_MAX_LENGTH:
        raise InvariantViolation(
            f"name must be at most {NAME_MAX_LENGTH} characters", field="name"
        )
    if len(description) > DESCRIPTION_MAX_LENGTH:
        raise InvariantViolation(
            f"description must be at most {DESCRIPTION_MAX_LENGTH} characters",
            field="description",
        )
    if not price.is_finite() or price < 0:
        raise InvariantViolation("price must be >= 0", field="price")
    if inventory_count < 0:
        raise InvariantViolation("inventory count must be >= 0", field="inventory_count")


@dataclass(slots=True, frozen=True)
class NewProduct:
    """Product fields supplied by a caller; the catalog assigns the id."""

    name: str
    description: str
    price: Decimal
    inventory_count: int

    def __post_init__(self) -> None:
        if not isinstance(self.price, Decimal):
            try:
                object.__setattr__(self, "price", Decimal(str(self.price)))
            except InvalidOperation as exc:
                raise InvariantViolation("price must be a decimal number", field="price") from exc
        _validate_product_fields(self.name, self.description, self.price, self.inventory_count)


@dataclass(slots=True, frozen=True)
class Product:
    id: int
    name: str
    description: str
    price: Decimal
    inventory_count: int

    def __post_init__(self) -> None:
        if self.id <= 0:
            raise InvariantViolation("product id must be positive", field="id")
        _validate_product_fields(self.name, self.description, self.price, self.inventory_count)

    @classmethod
    def from_new(cls, product_id: int, new_product: NewProduct) -> Product:
        return cls(
            id=product_id,
            name=new_product.name,
            description=new_product.description,
            price=new_product.price,
            inventory_count=new_product.inventory_count,
        )

    @property
    def in_stock(self) -> bool:
        return self.inventory_count > 0


@dataclass(slots=True, frozen=True)
class ProductFilter:
    """Search criteria; every provided criterion must hold, absent ones match all."""

    name_contains: str | None = None
    min_price: Decimal | None = None
    max_price: Decimal | None = None
    in_stock: bool | None = None

    def is_empty(self) -> bool:
        return (
            self.name_contains is None
            and self.min_price is None
            and self.max_price is None
            and self.in_stock is None
        )

    def matches(self, product: Product) -> bool:
        if self.name_contains is not None:
            if self.name_contains.casefold() not in product.name.casefold():
                return False
        if not self._within(product.price, self.min_price, self.max_price):
            return False
        if self.in_stock is not None and product.in_stock != self.in_stock:
            return False
        return True

    @staticmethod
    def _within(value: Decimal, low: Decimal | None, high: Decimal | None) -> bool:
        if low is not None and value < low:
            return False
        if high is not None and value > high:
            return False
        return True

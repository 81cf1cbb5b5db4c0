# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .cart.entities import Cart, CartItem
from .catalog.entities import NewProduct, Product, ProductFilter
from .exceptions import DomainError, InvariantViolation
from .users.entities import Claims, User

__all__ = [
    "Cart",
    "CartItem",
    "Claims",
    "DomainError",
    "InvariantViolation",
    "NewProduct",
    "Product",
    "ProductFilter",
    "User",
]

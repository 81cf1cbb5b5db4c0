# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from storefront.domain.catalog.entities import Product

from .entities import Cart


class CartRepository(Protocol):
    def get(self, user_id: int) -> Cart | None: ...
    def get_or_create(self, user_id: int) -> Cart: ...
    def add_item(self, user_id: int, product: Product, quantity: int) -> Cart: ...
    def remove_item(self, user_id: int, product_id: int) -> Cart | None: ...
    def clear(self, user_id: int) -> Cart | None: ...

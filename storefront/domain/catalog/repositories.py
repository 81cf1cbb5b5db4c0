# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import NewProduct, Product, ProductFilter


class ProductRepository(Protocol):
    def create(self, new_product: NewProduct) -> Product: ...
    def get_all(self) -> list[Product]: ...
    def get_by_id(self, product_id: int) -> Product | None: ...
    def update_inventory(self, product_id: int, new_count: int) -> Product | None: ...
    def filter(self, criteria: ProductFilter) -> list[Product]: ...

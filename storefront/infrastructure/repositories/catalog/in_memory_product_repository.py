# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import itertools
import threading
from dataclasses import replace

from storefront.domain.catalog.entities import NewProduct, Product, ProductFilter
from storefront.domain.catalog.repositories import ProductRepository
from storefront.domain.exceptions import InvariantViolation
from storefront.shared.logging import logger


class InMemoryProductRepository(ProductRepository):
    """Authoritative product catalog held in process memory.

    Products are immutable values keyed by id in insertion order, so reads
    hand out a list copy taken under the lock and never observe a half-done
    write. Ids come from a counter that only moves forward.
    """

    def __init__(self) -> None:
        self._products: dict[int, Product] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def create(self, new_product: NewProduct) -> Product:
        with self._lock:
            product = Product.from_new(next(self._ids), new_product)
            self._products[product.id] = product
        logger.debug(f"catalog.create: id={product.id} name={product.name!r}")
        return product

    def get_all(self) -> list[Product]:
        with self._lock:
            return list(self._products.values())

    def get_by_id(self, product_id: int) -> Product | None:
        with self._lock:
            return self._products.get(product_id)

    def update_inventory(self, product_id: int, new_count: int) -> Product | None:
        if new_count < 0:
            raise InvariantViolation("inventory count must be >= 0", field="inventory_count")
        with self._lock:
            current = self._products.get(product_id)
            if current is None:
                return None
            updated = replace(current, inventory_count=new_count)
            self._products[product_id] = updated
        logger.debug(
            f"catalog.update_inventory: id={product_id} "
            f"{current.inventory_count} -> {new_count}"
        )
        return updated

    def filter(self, criteria: ProductFilter) -> list[Product]:
        products = self.get_all()
        if criteria.is_empty():
            return products
        return [product for product in products if criteria.matches(product)]

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from storefront.domain.catalog.entities import Product
from storefront.domain.catalog.repositories import ProductRepository
from storefront.shared.errors import ProductNotFoundError
from storefront.shared.logging import logger


class UpdateInventoryUseCase:
    def __init__(self, products: ProductRepository) -> None:
        self._products = products

    def execute(self, product_id: int, new_count: int) -> Product:
        product = self._products.update_inventory(product_id, new_count)
        if product is None:
            raise ProductNotFoundError(product_id)
        logger.info(
            f"catalog.update_inventory: ok product_id={product_id} count={new_count}"
        )
        return product

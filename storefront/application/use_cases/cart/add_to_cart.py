# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from storefront.domain.cart.entities import Cart
from storefront.domain.cart.repositories import CartRepository
from storefront.domain.catalog.repositories import ProductRepository
from storefront.shared.errors import (
    InsufficientInventoryError,
    InvalidQuantityError,
    ProductNotFoundError,
)
from storefront.shared.logging import logger


class AddToCartUseCase:
    """Validate a cart addition against the catalog, then record it.

    The cart store trusts its caller for business rules; quantity, product
    existence and stock are all checked here before the store is touched.
    """

    def __init__(self, *, carts: CartRepository, products: ProductRepository) -> None:
        self._carts = carts
        self._products = products

    def execute(self, user_id: int, product_id: int, quantity: int) -> Cart:
        if quantity <= 0:
            raise InvalidQuantityError(quantity)

        product = self._products.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)

        if product.inventory_count < quantity:
            logger.info(
                f"cart.add: insufficient inventory product_id={product_id} "
                f"available={product.inventory_count} requested={quantity}"
            )
            raise InsufficientInventoryError(product.inventory_count, quantity)

        cart = self._carts.add_item(user_id, product, quantity)
        logger.info(
            f"cart.add: ok user_id={user_id} product_id={product_id} quantity={quantity}"
        )
        return cart

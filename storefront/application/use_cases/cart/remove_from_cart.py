from __future__ import annotations

from storefront.domain.cart.entities import Cart
from storefront.domain.cart.repositories import CartRepository
from storefront.shared.errors import CartNotFoundError
from storefront.shared.logging import logger


class RemoveFromCartUseCase:
    def __init__(self, carts: CartRepository) -> None:
        self._carts = carts

    def execute(self, user_id: int, product_id: int) -> Cart:
        cart = self._carts.remove_item(user_id, product_id)
        if cart is None:
            raise CartNotFoundError()
        logger.info(f"cart.remove: ok user_id={user_id} product_id={product_id}")
        return cart

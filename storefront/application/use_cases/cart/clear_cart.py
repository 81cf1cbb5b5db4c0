from __future__ import annotations

from storefront.domain.cart.entities import Cart
from storefront.domain.cart.repositories import CartRepository
from storefront.shared.errors import CartNotFoundError
from storefront.shared.logging import logger


class ClearCartUseCase:
    def __init__(self, carts: CartRepository) -> None:
        self._carts = carts

    def execute(self, user_id: int) -> Cart:
        cart = self._carts.clear(user_id)
        if cart is None:
            raise CartNotFoundError()
        logger.info(f"cart.clear: ok user_id={user_id}")
        return cart

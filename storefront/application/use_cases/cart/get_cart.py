from __future__ import annotations

from storefront.domain.cart.entities import Cart
from storefront.domain.cart.repositories import CartRepository


class GetCartUseCase:
    def __init__(self, carts: CartRepository) -> None:
        self._carts = carts

    def execute(self, user_id: int) -> Cart:
        return self._carts.get_or_create(user_id)

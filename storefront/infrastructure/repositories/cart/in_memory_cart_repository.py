# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import itertools
import threading

from storefront.domain.cart.entities import Cart
from storefront.domain.cart.repositories import CartRepository
from storefront.domain.catalog.entities import Product
from storefront.domain.exceptions import InvariantViolation
from storefront.shared.logging import logger


class InMemoryCartRepository(CartRepository):
    """One cart per user, created lazily.

    ``_guard`` covers the user->cart map and the cart id counter and is held
    only for lookups and creation. Every cart has its own lock that
    serializes mutations of that cart, so different users never wait on
    each other's cart updates. Callers always receive snapshots.
    """

    def __init__(self) -> None:
        self._carts: dict[int, Cart] = {}
        self._locks: dict[int, threading.Lock] = {}
        self._ids = itertools.count(1)
        self._guard = threading.Lock()

    def _lookup(self, user_id: int) -> tuple[Cart, threading.Lock] | None:
        with self._guard:
            cart = self._carts.get(user_id)
            if cart is None:
                return None
            return cart, self._locks[user_id]

    def _lookup_or_create(self, user_id: int) -> tuple[Cart, threading.Lock]:
        with self._guard:
            cart = self._carts.get(user_id)
            if cart is None:
                cart = Cart(id=next(self._ids), user_id=user_id)
                self._carts[user_id] = cart
                self._locks[user_id] = threading.Lock()
                logger.debug(f"cart.create: id={cart.id} user={user_id}")
            return cart, self._locks[user_id]

    def get(self, user_id: int) -> Cart | None:
        found = self._lookup(user_id)
        if found is None:
            return None
        cart, lock = found
        with lock:
            return cart.snapshot()

    def get_or_create(self, user_id: int) -> Cart:
        cart, lock = self._lookup_or_create(user_id)
        with lock:
            return cart.snapshot()

    def add_item(self, user_id: int, product: Product, quantity: int) -> Cart:
        if quantity <= 0:
            raise InvariantViolation("quantity must be positive", field="quantity")
        cart, lock = self._lookup_or_create(user_id)
        with lock:
            cart.add(product, quantity)
            return cart.snapshot()

    def remove_item(self, user_id: int, product_id: int) -> Cart | None:
        found = self._lookup(user_id)
        if found is None:
            return None
        cart, lock = found
        with lock:
            cart.remove(product_id)
            return cart.snapshot()

    def clear(self, user_id: int) -> Cart | None:
        found = self._lookup(user_id)
        if found is None:
            return None
        cart, lock = found
        with lock:
            cart.clear()
            return cart.snapshot()

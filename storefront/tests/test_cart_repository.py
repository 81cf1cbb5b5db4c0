from __future__ import annotations

import threading
from decimal import Decimal

import pytest

from storefront.domain import InvariantViolation, Product
from storefront.infrastructure.repositories.cart.in_memory_cart_repository import (
    InMemoryCartRepository,
)

WIDGET = Product(
    id=1, name="Widget", description="", price=Decimal("19.99"), inventory_count=100
)
GADGET = Product(id=2, name="Gadget", description="", price=Decimal("5.00"), inventory_count=100)


@pytest.fixture()
def carts() -> InMemoryCartRepository:
    return InMemoryCartRepository()


def test_get_or_create_is_idempotent(carts: InMemoryCartRepository) -> None:
    assert carts.get(7) is None

    first = carts.get_or_create(7)
    second = carts.get_or_create(7)

    assert first.id == second.id
    assert first.user_id == 7
    assert first.items == []


def test_each_user_gets_own_cart(carts: InMemoryCartRepository) -> None:
    assert carts.get_or_create(1).id != carts.get_or_create(2).id


def test_add_merges_quantities(carts: InMemoryCartRepository) -> None:
    carts.add_item(7, WIDGET, 2)
    cart = carts.add_item(7, WIDGET, 3)

    assert len(cart.items) == 1
    assert cart.items[0].quantity == 5
    assert cart.total == Decimal("99.95")


def test_add_rejects_non_positive_quantity(carts: InMemoryCartRepository) -> None:
    with pytest.raises(InvariantViolation):
        carts.add_item(7, WIDGET, 0)


def test_items_keep_price_at_time_of_add(carts: InMemoryCartRepository) -> None:
    carts.add_item(7, WIDGET, 1)
    repriced = Product(
        id=1, name="Widget v2", description="", price=Decimal("25.00"), inventory_count=1
    )

    cart = carts.add_item(7, repriced, 1)

    assert cart.items[0].unit_price == Decimal("19.99")
    assert cart.items[0].product_name == "Widget"
    assert cart.items[0].quantity == 2


def test_remove_absent_product_is_a_no_op(carts: InMemoryCartRepository) -> None:
    carts.add_item(7, WIDGET, 1)

    cart = carts.remove_item(7, GADGET.id)

    assert cart is not None
    assert [item.product_id for item in cart.items] == [WIDGET.id]


def test_remove_and_clear_without_cart_return_none(carts: InMemoryCartRepository) -> None:
    assert carts.remove_item(7, 1) is None
    assert carts.clear(7) is None


def test_clear_keeps_cart_identity(carts: InMemoryCartRepository) -> None:
    before = carts.add_item(7, WIDGET, 1)
    carts.add_item(7, GADGET, 2)

    cleared = carts.clear(7)

    assert cleared is not None
    assert cleared.items == []
    assert (cleared.id, cleared.user_id) == (before.id, 7)


def test_returned_cart_is_a_snapshot(carts: InMemoryCartRepository) -> None:
    snapshot = carts.add_item(7, WIDGET, 1)
    carts.add_item(7, GADGET, 1)

    assert len(snapshot.items) == 1


def test_concurrent_adds_are_not_lost(carts: InMemoryCartRepository) -> None:
    workers, per_worker = 8, 100

    def add_many() -> None:
        for _ in range(per_worker):
            carts.add_item(7, WIDGET, 1)

    threads = [threading.Thread(target=add_many) for _ in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    cart = carts.get(7)
    assert cart is not None
    assert cart.items[0].quantity == workers * per_worker


def test_concurrent_first_access_creates_one_cart(carts: InMemoryCartRepository) -> None:
    barrier = threading.Barrier(8)
    seen: list[int] = []
    seen_lock = threading.Lock()

    def first_touch() -> None:
        barrier.wait()
        cart_id = carts.get_or_create(7).id
        with seen_lock:
            seen.append(cart_id)

    threads = [threading.Thread(target=first_touch) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(set(seen)) == 1

from __future__ import annotations

import threading
from decimal import Decimal

import pytest

from storefront.domain import InvariantViolation, NewProduct, ProductFilter
from storefront.infrastructure.repositories.catalog.in_memory_product_repository import (
    InMemoryProductRepository,
)


def _new(name: str, price: str, inventory: int) -> NewProduct:
    return NewProduct(name=name, description="", price=Decimal(price), inventory_count=inventory)


@pytest.fixture()
def catalog() -> InMemoryProductRepository:
    repo = InMemoryProductRepository()
    repo.create(_new("Laptop Pro", "1299.99", 10))
    repo.create(_new("Wireless Mouse", "29.99", 0))
    repo.create(_new("Mechanical Keyboard", "149.99", 20))
    return repo


def test_ids_start_at_one_and_increase() -> None:
    repo = InMemoryProductRepository()

    first = repo.create(_new("A", "1", 1))
    second = repo.create(_new("B", "2", 1))

    assert (first.id, second.id) == (1, 2)


def test_get_by_id(catalog: InMemoryProductRepository) -> None:
    product = catalog.get_by_id(2)

    assert product is not None
    assert product.name == "Wireless Mouse"
    assert catalog.get_by_id(99) is None


def test_get_all_is_a_copy(catalog: InMemoryProductRepository) -> None:
    listing = catalog.get_all()
    listing.clear()

    assert len(catalog.get_all()) == 3


def test_update_inventory(catalog: InMemoryProductRepository) -> None:
    before = catalog.get_by_id(1)
    updated = catalog.update_inventory(1, 3)

    assert updated is not None
    assert updated.inventory_count == 3
    assert before is not None and before.inventory_count == 10
    assert catalog.update_inventory(99, 3) is None


def test_update_inventory_rejects_negative(catalog: InMemoryProductRepository) -> None:
    with pytest.raises(InvariantViolation):
        catalog.update_inventory(1, -1)

    product = catalog.get_by_id(1)
    assert product is not None and product.inventory_count == 10


@pytest.mark.parametrize(
    ("criteria", "expected"),
    [
        (ProductFilter(), ["Laptop Pro", "Wireless Mouse", "Mechanical Keyboard"]),
        (ProductFilter(name_contains="key"), ["Mechanical Keyboard"]),
        (ProductFilter(min_price=Decimal("29.99"), max_price=Decimal("149.99")),
         ["Wireless Mouse", "Mechanical Keyboard"]),
        (ProductFilter(in_stock=True), ["Laptop Pro", "Mechanical Keyboard"]),
        (ProductFilter(in_stock=False), ["Wireless Mouse"]),
        (ProductFilter(name_contains="o", max_price=Decimal("100")), ["Wireless Mouse"]),
        (ProductFilter(name_contains="tablet"), []),
    ],
)
def test_filter(
    catalog: InMemoryProductRepository, criteria: ProductFilter, expected: list[str]
) -> None:
    assert [product.name for product in catalog.filter(criteria)] == expected


def test_concurrent_creates_get_distinct_ids() -> None:
    repo = InMemoryProductRepository()
    workers, per_worker = 8, 50

    def create_many(worker: int) -> None:
        for n in range(per_worker):
            repo.create(_new(f"item-{worker}-{n}", "1.00", 1))

    threads = [threading.Thread(target=create_many, args=(w,)) for w in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    ids = [product.id for product in repo.get_all()]
    assert sorted(ids) == list(range(1, workers * per_worker + 1))

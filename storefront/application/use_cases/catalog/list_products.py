from __future__ import annotations

from storefront.domain.catalog.entities import Product, ProductFilter
from storefront.domain.catalog.repositories import ProductRepository


class ListProductsUseCase:
    def __init__(self, products: ProductRepository) -> None:
        self._products = products

    def execute(self, criteria: ProductFilter | None = None) -> list[Product]:
        if criteria is None:
            return self._products.get_all()
        return self._products.filter(criteria)

from __future__ import annotations

from storefront.domain.catalog.entities import Product
from storefront.domain.catalog.repositories import ProductRepository
from storefront.shared.errors import ProductNotFoundError


class GetProductUseCase:
    def __init__(self, products: ProductRepository) -> None:
        self._products = products

    def execute(self, product_id: int) -> Product:
        product = self._products.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

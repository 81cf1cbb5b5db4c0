from __future__ import annotations

from storefront.domain.catalog.entities import NewProduct, Product
from storefront.domain.catalog.repositories import ProductRepository
from storefront.shared.logging import logger


class CreateProductUseCase:
    def __init__(self, products: ProductRepository) -> None:
        self._products = products

    def execute(self, new_product: NewProduct) -> Product:
        product = self._products.create(new_product)
        logger.info(f"catalog.create: ok product_id={product.id}")
        return product

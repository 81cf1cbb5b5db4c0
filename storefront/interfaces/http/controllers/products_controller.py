# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from storefront.application.use_cases.catalog.create_product import CreateProductUseCase
from storefront.application.use_cases.catalog.get_product import GetProductUseCase
from storefront.application.use_cases.catalog.list_products import ListProductsUseCase
from storefront.application.use_cases.catalog.update_inventory import UpdateInventoryUseCase
from storefront.application.use_cases.users.resolve_identity import ResolveIdentityUseCase
from storefront.auth import auth_required, current_user_id
from storefront.domain.catalog.entities import Product
from storefront.interfaces.http.dto.catalog import (
    CreateProductRequestDTO,
    ProductDTO,
    ProductQueryDTO,
    UpdateInventoryRequestDTO,
)
from storefront.shared.errors.validation import raise_validation_error
from storefront.shared.logging import logger


def _render(product: Product) -> dict:
    return ProductDTO.model_validate(product).model_dump(mode="json")


class ProductsController:
    def __init__(
        self,
        *,
        list_use_case: ListProductsUseCase,
        get_use_case: GetProductUseCase,
        create_use_case: CreateProductUseCase,
        update_inventory_use_case: UpdateInventoryUseCase,
        identity: ResolveIdentityUseCase,
    ) -> None:
        self._list_use_case = list_use_case
        self._get_use_case = get_use_case
        self._create_use_case = create_use_case
        self._update_inventory_use_case = update_inventory_use_case
        self.identity = identity

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("products", __name__, url_prefix="/api/products")
        bp.add_url_rule("", view_func=self.list_products, methods=["GET"])
        bp.add_url_rule("", view_func=self.create, methods=["POST"])
        bp.add_url_rule("/<int:product_id>", view_func=self.get_product, methods=["GET"])
        bp.add_url_rule(
            "/<int:product_id>/inventory",
            view_func=self.update_inventory,
            methods=["PATCH"],
        )
        return bp

    def list_products(self) -> tuple[Response, int]:
        try:
            query = ProductQueryDTO.model_validate(request.args.to_dict())
        except ValidationError as exc:
            raise_validation_error(exc)

        criteria = query.to_filter()
        products = self._list_use_case.execute(None if criteria.is_empty() else criteria)
        return jsonify([_render(p) for p in products]), 200

    def get_product(self, product_id: int) -> tuple[Response, int]:
        return jsonify(_render(self._get_use_case.execute(product_id))), 200

    @auth_required
    def create(self) -> tuple[Response, int]:
        try:
            dto = CreateProductRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        product = self._create_use_case.execute(dto.to_new_product())

        logger.info(f"products.create: by user_id={current_user_id()} product_id={product.id}")
        return jsonify(_render(product)), 201

    @auth_required
    def update_inventory(self, product_id: int) -> tuple[Response, int]:
        try:
            dto = UpdateInventoryRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        product = self._update_inventory_use_case.execute(product_id, dto.inventory_count)
        return jsonify(_render(product)), 200

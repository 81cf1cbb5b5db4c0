# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from storefront.application.use_cases.cart.add_to_cart import AddToCartUseCase
from storefront.application.use_cases.cart.clear_cart import ClearCartUseCase
from storefront.application.use_cases.cart.get_cart import GetCartUseCase
from storefront.application.use_cases.cart.remove_from_cart import RemoveFromCartUseCase
from storefront.application.use_cases.users.resolve_identity import ResolveIdentityUseCase
from storefront.auth import auth_required, current_user_id
from storefront.domain.cart.entities import Cart
from storefront.interfaces.http.dto.cart import AddItemRequestDTO, CartDTO
from storefront.shared.errors.validation import raise_validation_error


def _render(cart: Cart) -> dict:
    return CartDTO.model_validate(cart).model_dump(mode="json")


class CartController:
    def __init__(
        self,
        *,
        get_use_case: GetCartUseCase,
        add_use_case: AddToCartUseCase,
        remove_use_case: RemoveFromCartUseCase,
        clear_use_case: ClearCartUseCase,
        identity: ResolveIdentityUseCase,
    ) -> None:
        self._get_use_case = get_use_case
        self._add_use_case = add_use_case
        self._remove_use_case = remove_use_case
        self._clear_use_case = clear_use_case
        self.identity = identity

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("cart", __name__, url_prefix="/api/cart")
        bp.add_url_rule("", view_func=self.get_cart, methods=["GET"])
        bp.add_url_rule("/add", view_func=self.add_item, methods=["POST"])
        bp.add_url_rule(
            "/remove/<int:product_id>",
            view_func=self.remove_item,
            methods=["DELETE"],
        )
        bp.add_url_rule("/clear", view_func=self.clear, methods=["POST"])
        return bp

    @auth_required
    def get_cart(self) -> tuple[Response, int]:
        return jsonify(_render(self._get_use_case.execute(current_user_id()))), 200

    @auth_required
    def add_item(self) -> tuple[Response, int]:
        try:
            dto = AddItemRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        cart = self._add_use_case.execute(current_user_id(), dto.product_id, dto.quantity)
        return jsonify(_render(cart)), 200

    @auth_required
    def remove_item(self, product_id: int) -> tuple[Response, int]:
        cart = self._remove_use_case.execute(current_user_id(), product_id)
        return jsonify(_render(cart)), 200

    @auth_required
    def clear(self) -> tuple[Response, int]:
        return jsonify(_render(self._clear_use_case.execute(current_user_id()))), 200

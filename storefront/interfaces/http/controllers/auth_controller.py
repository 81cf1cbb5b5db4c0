# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from storefront.application.use_cases.users.get_current_user import GetCurrentUserUseCase
from storefront.application.use_cases.users.login_user import LoginUserUseCase
from storefront.application.use_cases.users.register_user import RegisterUserUseCase
from storefront.application.use_cases.users.resolve_identity import ResolveIdentityUseCase
from storefront.auth import auth_required, current_user_id
from storefront.interfaces.http.dto.auth import (
    AuthResponseDTO,
    LoginRequestDTO,
    RegisterRequestDTO,
    UserProfileDTO,
)
from storefront.shared.errors.validation import raise_validation_error
from storefront.shared.middleware.rate_limit import rate_limit


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        current_user_use_case: GetCurrentUserUseCase,
        identity: ResolveIdentityUseCase,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._current_user_use_case = current_user_use_case
        self.identity = identity

    @rate_limit(limit=5, window_seconds=60.0)
    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        user, token = self._register_use_case.execute(dto.username, dto.email, dto.password)

        payload = AuthResponseDTO(token=token, user_id=user.id, username=user.username)
        return jsonify(payload.model_dump()), 201

    @rate_limit(limit=10, window_seconds=60.0)
    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        user, token = self._login_use_case.execute(dto.username, dto.password)

        payload = AuthResponseDTO(token=token, user_id=user.id, username=user.username)
        return jsonify(payload.model_dump()), 200

    @auth_required
    def me(self) -> tuple[Response, int]:
        user = self._current_user_use_case.execute(current_user_id())
        return jsonify(UserProfileDTO.model_validate(user.to_public()).model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api/auth")
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/me", view_func=self.me, methods=["GET"])
        return bp

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from storefront.domain.users.entities import User
from storefront.domain.users.exceptions import InvalidCredentialsError
from storefront.domain.users.repositories import PasswordHasher, TokenService, UserRepository
from storefront.shared.logging import logger


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: TokenService,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher

    def execute(self, username: str, password: str) -> tuple[User, str]:
        user = self._users.find_by_username(username)
        password_valid = user is not None and self._password_hasher.verify(
            user.password_hash, password
        )

        if not password_valid or user is None:
            logger.warning("auth.login: invalid credentials")
            raise InvalidCredentialsError()

        token = self._tokens.issue(str(user.id))
        logger.info(f"auth.login: ok user_id={user.id}")
        return user, token

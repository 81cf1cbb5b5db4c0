# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from storefront.domain.users.entities import User
from storefront.domain.users.exceptions import UserAlreadyExistsError
from storefront.domain.users.repositories import PasswordHasher, TokenService, UserRepository
from storefront.shared.logging import logger


class RegisterUserUseCase:
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

    def execute(self, username: str, email: str, password: str) -> tuple[User, str]:
        if self._users.find_by_username(username) or self._users.find_by_email(email):
            raise UserAlreadyExistsError()
        hashed = self._password_hasher.hash(password)
        user = User(id=0, username=username, email=email, password_hash=hashed)
        persisted = self._users.add(user)
        token = self._tokens.issue(str(persisted.id))
        logger.info(f"auth.register: ok user_id={persisted.id}")
        return persisted, token

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import itertools
import threading
from dataclasses import replace

from storefront.domain.users.entities import User
from storefront.domain.users.exceptions import UserAlreadyExistsError
from storefront.domain.users.repositories import UserRepository


class InMemoryUserRepository(UserRepository):
    """Process-local credential store.

    Usernames and emails are unique regardless of case. ``add`` checks and
    inserts under one lock, so two concurrent registrations of the same name
    cannot both succeed.
    """

    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._by_username: dict[str, int] = {}
        self._by_email: dict[str, int] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def find_by_username(self, username: str) -> User | None:
        with self._lock:
            user_id = self._by_username.get(username.casefold())
            return self._users.get(user_id) if user_id is not None else None

    def find_by_email(self, email: str) -> User | None:
        with self._lock:
            user_id = self._by_email.get(email.casefold())
            return self._users.get(user_id) if user_id is not None else None

    def find_by_id(self, user_id: int) -> User | None:
        with self._lock:
            return self._users.get(user_id)

    def add(self, user: User) -> User:
        username_key = user.username.casefold()
        email_key = user.email.casefold()
        with self._lock:
            if username_key in self._by_username or email_key in self._by_email:
                raise UserAlreadyExistsError()
            persisted = replace(user, id=next(self._ids))
            self._users[persisted.id] = persisted
            self._by_username[username_key] = persisted.id
            self._by_email[email_key] = persisted.id
            return persisted

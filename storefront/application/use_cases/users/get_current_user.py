from __future__ import annotations

from storefront.domain.users.entities import User
from storefront.domain.users.repositories import UserRepository
from storefront.shared.errors import UnauthenticatedError


class GetCurrentUserUseCase:
    def __init__(self, *, users: UserRepository) -> None:
        self._users = users

    def execute(self, user_id: int) -> User:
        user = self._users.find_by_id(user_id)
        if user is None:
            # A valid token for a user this process never registered.
            raise UnauthenticatedError()
        return user

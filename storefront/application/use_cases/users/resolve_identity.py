# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Use-case turning a bearer token into the caller's user id."""

from __future__ import annotations

from storefront.domain.users.exceptions import TokenError
from storefront.domain.users.repositories import TokenService
from storefront.shared.errors import UnauthenticatedError
from storefront.shared.logging import logger


class ResolveIdentityUseCase:
    def __init__(self, *, tokens: TokenService) -> None:
        self._tokens = tokens

    def execute(self, token: str) -> int:
        if not token:
            raise UnauthenticatedError()
        try:
            claims = self._tokens.verify(token)
        except TokenError as exc:
            # The reason is logged, never returned to the client.
            logger.info(f"auth.resolve: rejected token reason={exc.reason}")
            raise UnauthenticatedError() from exc
        try:
            return int(claims.subject)
        except ValueError as exc:
            logger.warning("auth.resolve: non-numeric subject in a validly signed token")
            raise UnauthenticatedError() from exc

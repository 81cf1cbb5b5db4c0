# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import wraps
from typing import Protocol, cast

from flask import g, request

from storefront.shared.logging import logger


class IdentityResolver(Protocol):
    def execute(self, token: str) -> int: ...


class AuthenticatedController(Protocol):
    identity: IdentityResolver


def bearer_token() -> str:
    auth = request.headers.get("Authorization", "")
    scheme, _, token = auth.partition(" ")
    if scheme.lower() != "bearer":
        return ""
    return token.strip()


def current_user_id() -> int:
    """Return the user id resolved by :func:`auth_required` for this request."""
    return cast(int, g.user_id)


def auth_required(f):
    """Resolve the bearer token through the controller's ``identity`` resolver.

    Any failure surfaces as a 401 ``unauthorized`` error raised by the
    resolver; the wrapped view only runs for an authenticated caller.
    """

    @wraps(f)
    def inner(self: AuthenticatedController, *a, **kw):
        token = bearer_token()
        if not token:
            logger.info(f"No bearer token on {request.method} {request.path}")
        g.user_id = self.identity.execute(token)
        logger.debug(f"Auth OK: user={g.user_id} {request.method} {request.path}")
        return f(self, *a, **kw)

    return inner

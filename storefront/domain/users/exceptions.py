# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from storefront.shared.errors.base import DomainError


class UserAlreadyExistsError(DomainError):
    code = "user_already_exists"
    status = HTTPStatus.CONFLICT


class InvalidCredentialsError(DomainError):
    code = "invalid_credentials"
    status = HTTPStatus.UNAUTHORIZED


class TokenError(Exception):
    """Base for token verification failures.

    The subclass tells callers which check failed; HTTP responses collapse
    all of them into a single ``unauthorized`` answer.
    """

    reason = "invalid"


class MalformedTokenError(TokenError):
    reason = "malformed"


class InvalidTokenSignatureError(TokenError):
    reason = "invalid_signature"


class ExpiredTokenError(TokenError):
    reason = "expired"

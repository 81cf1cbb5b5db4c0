# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Claims, User
from .exceptions import (
    ExpiredTokenError,
    InvalidCredentialsError,
    InvalidTokenSignatureError,
    MalformedTokenError,
    TokenError,
    UserAlreadyExistsError,
)

__all__ = [
    "Claims",
    "ExpiredTokenError",
    "InvalidCredentialsError",
    "InvalidTokenSignatureError",
    "MalformedTokenError",
    "TokenError",
    "User",
    "UserAlreadyExistsError",
]

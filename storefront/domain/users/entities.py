# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from storefront.domain.exceptions import InvariantViolation

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 64
EMAIL_MIN_LENGTH = 3
EMAIL_MAX_LENGTH = 254


@dataclass(slots=True, frozen=True)
class User:
    """Stored credential of a registered user.

    ``password_hash`` is an opaque encoded hash. It is excluded from ``repr``
    and from :meth:`to_public`, which is the only user-facing shape.
    """

    id: int
    username: str
    email: str
    password_hash: str = field(repr=False)

    def __post_init__(self) -> None:
        if not USERNAME_MIN_LENGTH <= len(self.username) <= USERNAME_MAX_LENGTH:
            raise InvariantViolation(
                f"username must be {USERNAME_MIN_LENGTH}..{USERNAME_MAX_LENGTH} characters",
                field="username",
            )
        if not EMAIL_MIN_LENGTH <= len(self.email) <= EMAIL_MAX_LENGTH:
            raise InvariantViolation(
                f"email must be {EMAIL_MIN_LENGTH}..{EMAIL_MAX_LENGTH} characters",
                field="email",
            )
        if not self.password_hash:
            raise InvariantViolation("password hash is required", field="password_hash")

    def to_public(self) -> dict[str, Any]:
        return {"id": self.id, "username": self.username, "email": self.email}


@dataclass(slots=True, frozen=True)
class Claims:
    """Decoded payload of an access token."""

    subject: str
    issued_at: datetime
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        # The instant of expiry already counts as expired.
        return now >= self.expires_at

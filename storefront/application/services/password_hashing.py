"""Password hashing strategies."""

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from storefront.domain.users.repositories import PasswordHasher
from storefront.shared.logging import logger

# scrypt is memory-hard; its N:r:p parameters are written into every hash.
DEFAULT_METHOD = "scrypt"
# 24 characters drawn from 62 symbols is ~142 bits of salt.
DEFAULT_SALT_LENGTH = 24


class WerkzeugPasswordHasher(PasswordHasher):
    def __init__(
        self, *, method: str = DEFAULT_METHOD, salt_length: int = DEFAULT_SALT_LENGTH
    ) -> None:
        self._method = method
        self._salt_length = salt_length

    def hash(self, password: str) -> str:
        return str(
            generate_password_hash(password, method=self._method, salt_length=self._salt_length)
        )

    def verify(self, hashed: str, password: str) -> bool:
        try:
            return bool(check_password_hash(hashed, password))
        except Exception as exc:
            # Corrupted or forged hashes count as a mismatch.
            logger.debug(f"password_hashing: unverifiable hash ({type(exc).__name__})")
            return False

from __future__ import annotations

import re

from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError

from storefront.shared.errors.validation_types import ValidationErrorType

_USERNAME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9_.-]*$")
_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def _strip(value: object) -> object:
    return value.strip() if isinstance(value, str) else value


def _check_username(value: str) -> str:
    value = value.strip()
    if not value:
        raise PydanticCustomError(ValidationErrorType.MISSING, "Username cannot be empty", {})
    if not _USERNAME_RE.match(value):
        raise PydanticCustomError(
            ValidationErrorType.USERNAME_INVALID_CHARS,
            "Username must start with a letter and contain only letters, digits, '_', '.' or '-'",
            {"pattern": _USERNAME_RE.pattern},
        )
    return value


class RegisterRequestDTO(BaseModel):
    username: str = Field(min_length=3, max_length=64)
    email: str = Field(min_length=3, max_length=254)
    password: str = Field(min_length=1, max_length=128)

    @field_validator("username", "email", mode="before")
    @classmethod
    def strip_identity(cls, value: object) -> object:
        # Length limits apply to the stripped value.
        return _strip(value)

    @field_validator("username")
    @classmethod
    def validate_username(cls, value: str) -> str:
        return _check_username(value)

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        value = value.strip()
        if not _EMAIL_RE.match(value):
            raise PydanticCustomError(
                ValidationErrorType.EMAIL_INVALID,
                "Email address is not valid",
                {},
            )
        return value

    @field_validator("password")
    @classmethod
    def validate_password_strength(cls, value: str) -> str:
        if len(value) < 8:
            raise PydanticCustomError(
                ValidationErrorType.PASSWORD_TOO_SHORT,
                "Password must be at least 8 characters long",
                {"min_length": 8},
            )

        if not re.search(r"[^\W\d_]", value):
            raise PydanticCustomError(
                ValidationErrorType.PASSWORD_NO_LETTER,
                "Password must contain at least one letter",
                {},
            )

        if not re.search(r"\d", value):
            raise PydanticCustomError(
                ValidationErrorType.PASSWORD_NO_DIGIT,
                "Password must contain at least one digit",
                {},
            )

        return value


class LoginRequestDTO(BaseModel):
    username: str = Field(min_length=3, max_length=64)
    password: str = Field(min_length=1, max_length=128)  # No strength check on login

    @field_validator("username", mode="before")
    @classmethod
    def strip_username(cls, value: object) -> object:
        return _strip(value)

    @field_validator("username")
    @classmethod
    def validate_username(cls, value: str) -> str:
        return _check_username(value)


class AuthResponseDTO(BaseModel):
    token: str
    user_id: int
    username: str


class UserProfileDTO(BaseModel):
    id: int
    username: str
    email: str

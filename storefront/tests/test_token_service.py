from __future__ import annotations

from datetime import timedelta

import jwt
import pytest

from storefront.application.services.tokens import TOKEN_LIFETIME, JwtTokenService
from storefront.domain.users.exceptions import (
    ExpiredTokenError,
    InvalidTokenSignatureError,
    MalformedTokenError,
    TokenError,
)
from storefront.infrastructure.clock import FrozenClock

SECRET = "unit-test-signing-secret-abcdefghijklmnop"


@pytest.fixture()
def tokens(clock: FrozenClock) -> JwtTokenService:
    return JwtTokenService(secret=SECRET, clock=clock)


def test_issued_token_verifies_to_its_subject(
    tokens: JwtTokenService, clock: FrozenClock
) -> None:
    t0 = clock.now()
    claims = tokens.verify(tokens.issue("42"))

    assert claims.subject == "42"
    assert claims.issued_at == t0
    assert claims.expires_at == t0 + TOKEN_LIFETIME


def test_token_valid_until_one_second_before_expiry(
    tokens: JwtTokenService, clock: FrozenClock
) -> None:
    token = tokens.issue("1")
    clock.advance(TOKEN_LIFETIME - timedelta(seconds=1))

    assert tokens.verify(token).subject == "1"


def test_token_expires_at_exact_expiry_instant(
    tokens: JwtTokenService, clock: FrozenClock
) -> None:
    token = tokens.issue("1")
    clock.advance(TOKEN_LIFETIME)

    with pytest.raises(ExpiredTokenError):
        tokens.verify(token)


def test_token_from_other_secret_has_invalid_signature(
    tokens: JwtTokenService, clock: FrozenClock
) -> None:
    foreign = JwtTokenService(secret="another-signing-secret-abcdefghijklmnop", clock=clock)

    with pytest.raises(InvalidTokenSignatureError):
        tokens.verify(foreign.issue("1"))


def test_swapped_payload_breaks_signature(tokens: JwtTokenService) -> None:
    header, _, signature = tokens.issue("1").split(".")
    _, payload, _ = tokens.issue("2").split(".")

    with pytest.raises(InvalidTokenSignatureError):
        tokens.verify(f"{header}.{payload}.{signature}")


@pytest.mark.parametrize("garbage", ["", "abc", "a.b.c", "not a token at all"])
def test_garbage_is_malformed(tokens: JwtTokenService, garbage: str) -> None:
    with pytest.raises(MalformedTokenError):
        tokens.verify(garbage)


def test_missing_claims_are_malformed(tokens: JwtTokenService) -> None:
    token = jwt.encode({"sub": "1"}, SECRET, algorithm="HS256")

    with pytest.raises(MalformedTokenError):
        tokens.verify(token)


def test_non_numeric_expiry_is_malformed(tokens: JwtTokenService, clock: FrozenClock) -> None:
    token = jwt.encode(
        {"sub": "1", "iat": int(clock.now().timestamp()), "exp": "tomorrow"},
        SECRET,
        algorithm="HS256",
    )

    with pytest.raises(MalformedTokenError):
        tokens.verify(token)


def test_unsigned_token_is_rejected(tokens: JwtTokenService, clock: FrozenClock) -> None:
    exp = int((clock.now() + TOKEN_LIFETIME).timestamp())
    token = jwt.encode(
        {"sub": "1", "iat": int(clock.now().timestamp()), "exp": exp}, None, algorithm="none"
    )

    with pytest.raises(TokenError):
        tokens.verify(token)


def test_empty_secret_is_refused(clock: FrozenClock) -> None:
    with pytest.raises(ValueError):
        JwtTokenService(secret="", clock=clock)

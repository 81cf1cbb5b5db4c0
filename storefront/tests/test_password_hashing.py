from __future__ import annotations

import pytest

from storefront.application.services.password_hashing import WerkzeugPasswordHasher


@pytest.fixture(scope="module")
def hasher() -> WerkzeugPasswordHasher:
    return WerkzeugPasswordHasher()


def test_hash_verifies_original_password(hasher: WerkzeugPasswordHasher) -> None:
    hashed = hasher.hash("secret123")

    assert hashed != "secret123"
    assert hasher.verify(hashed, "secret123") is True
    assert hasher.verify(hashed, "secret124") is False


def test_same_password_hashes_differently(hasher: WerkzeugPasswordHasher) -> None:
    first = hasher.hash("secret123")
    second = hasher.hash("secret123")

    assert first != second
    assert hasher.verify(first, "secret123")
    assert hasher.verify(second, "secret123")


@pytest.mark.parametrize("password", ["", "пароль-密码-🔑", "x" * 1000])
def test_unusual_passwords_round_trip(hasher: WerkzeugPasswordHasher, password: str) -> None:
    hashed = hasher.hash(password)

    assert hasher.verify(hashed, password)
    assert not hasher.verify(hashed, password + "!")


@pytest.mark.parametrize("garbage", ["", "not-a-hash", "scrypt:$$", "pbkdf2:sha256:1$x"])
def test_malformed_hash_is_a_mismatch(hasher: WerkzeugPasswordHasher, garbage: str) -> None:
    assert hasher.verify(garbage, "secret123") is False

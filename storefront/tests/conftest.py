from __future__ import annotations

import os
import tempfile
from collections.abc import Callable
from datetime import UTC, datetime

import pytest

os.environ.setdefault("JWT_SECRET", "storefront-test-signing-secret-0123456789")
os.environ.setdefault("ENABLE_RATE_LIMIT", "false")
os.environ.setdefault("LOG_FILE", os.path.join(tempfile.gettempdir(), "storefront-tests.log"))

from flask import Flask  # noqa: E402
from flask.testing import FlaskClient  # noqa: E402

from storefront.app import create_app  # noqa: E402
from storefront.infrastructure.clock import FrozenClock  # noqa: E402
from storefront.infrastructure.container import Container  # noqa: E402
from storefront.shared.config import load_config  # noqa: E402

T0 = datetime(2025, 1, 1, 12, 0, 0, tzinfo=UTC)


@pytest.fixture()
def clock() -> FrozenClock:
    return FrozenClock(T0)


@pytest.fixture()
def container(clock: FrozenClock) -> Container:
    return Container(load_config(), clock=clock)


@pytest.fixture()
def app(container: Container) -> Flask:
    return create_app(load_config(), container=container)


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    return app.test_client()


@pytest.fixture()
def register(client: FlaskClient) -> Callable[..., dict[str, str]]:
    """Register a user through the API and return its bearer headers."""

    def _register(username: str = "alice", password: str = "secret123") -> dict[str, str]:
        response = client.post(
            "/api/auth/register",
            json={"username": username, "email": f"{username}@example.com", "password": password},
        )
        assert response.status_code == 201, response.get_json()
        return {"Authorization": f"Bearer {response.get_json()['token']}"}

    return _register

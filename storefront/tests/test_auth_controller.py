from __future__ import annotations

from typing import cast
from unittest.mock import MagicMock

import pytest
from flask import Flask

from storefront.application.use_cases.users.register_user import RegisterUserUseCase
from storefront.application.use_cases.users.resolve_identity import ResolveIdentityUseCase
from storefront.domain.exceptions import InvariantViolation
from storefront.domain.users.entities import User
from storefront.interfaces.http.controllers.auth_controller import AuthController
from storefront.shared.errors import UnauthenticatedError
from storefront.shared.middleware.error_handler import configure_error_handling


@pytest.fixture()
def flask_app() -> Flask:
    app = Flask(__name__)
    configure_error_handling(app)
    return app


def _controller(**overrides) -> AuthController:
    deps = {
        "register_use_case": MagicMock(),
        "login_use_case": MagicMock(),
        "current_user_use_case": MagicMock(),
        "identity": MagicMock(),
    }
    deps.update(overrides)
    return AuthController(**deps)


def test_register_endpoint_returns_token(flask_app: Flask) -> None:
    register_called: dict[str, tuple[str, str, str]] = {}

    class StubRegister:
        def execute(self, username: str, email: str, password: str) -> tuple[User, str]:
            register_called["args"] = (username, email, password)
            return User(id=1, username=username, email=email, password_hash="hash"), "token123"

    controller = _controller(register_use_case=cast(RegisterUserUseCase, StubRegister()))
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post(
            "/api/auth/register",
            json={"username": "alice", "email": "alice@example.com", "password": "secret123"},
        )

    assert response.status_code == 201
    assert register_called["args"] == ("alice", "alice@example.com", "secret123")
    assert response.get_json() == {"token": "token123", "user_id": 1, "username": "alice"}


@pytest.mark.parametrize(
    ("payload", "field"),
    [
        ({"username": "a", "email": "a@example.com", "password": "secret123"}, "username"),
        ({"username": "alice", "email": "nope", "password": "secret123"}, "email"),
        ({"username": "alice", "email": "a@example.com", "password": "short1"}, "password"),
        ({"username": "alice", "email": "a@example.com", "password": "lettersonly"}, "password"),
    ],
)
def test_register_invalid_payload_returns_422(
    flask_app: Flask, payload: dict, field: str
) -> None:
    controller = _controller()
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/api/auth/register", json=payload)

    assert response.status_code == 422
    body = response.get_json()
    assert body["error"] == "validation_error"
    assert field in body["context"]["fields"]
    controller._register_use_case.execute.assert_not_called()


def test_login_invalid_payload_returns_422(flask_app: Flask) -> None:
    flask_app.register_blueprint(_controller().as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/api/auth/login", json={"username": "a"})

    assert response.status_code == 422
    assert response.get_json()["error"] == "validation_error"


def test_me_requires_bearer_token(flask_app: Flask) -> None:
    identity = MagicMock(spec=ResolveIdentityUseCase)
    identity.execute.side_effect = UnauthenticatedError()
    flask_app.register_blueprint(_controller(identity=identity).as_blueprint())

    with flask_app.test_client() as client:
        response = client.get("/api/auth/me", headers={"Authorization": "Basic abc"})

    assert response.status_code == 401
    assert response.get_json() == {"error": "unauthorized"}
    identity.execute.assert_called_once_with("")


def test_me_returns_profile(flask_app: Flask) -> None:
    identity = MagicMock(spec=ResolveIdentityUseCase)
    identity.execute.return_value = 1
    current = MagicMock()
    current.execute.return_value = User(
        id=1, username="alice", email="alice@example.com", password_hash="hash"
    )
    controller = _controller(identity=identity, current_user_use_case=current)
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.get("/api/auth/me", headers={"Authorization": "bearer tok"})

    assert response.status_code == 200
    assert response.get_json() == {"id": 1, "username": "alice", "email": "alice@example.com"}
    identity.execute.assert_called_once_with("tok")
    current.execute.assert_called_once_with(1)


def test_entity_invariant_failure_returns_422(flask_app: Flask) -> None:
    register = MagicMock()
    register.execute.side_effect = InvariantViolation("too short", field="username")
    flask_app.register_blueprint(_controller(register_use_case=register).as_blueprint())

    with flask_app.test_client() as client:
        response = client.post(
            "/api/auth/register",
            json={"username": "alice", "email": "alice@example.com", "password": "secret123"},
        )

    assert response.status_code == 422
    assert response.get_json() == {
        "error": "validation_error",
        "context": {"field": "username", "message": "too short"},
    }

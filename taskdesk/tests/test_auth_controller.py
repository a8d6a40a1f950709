from __future__ import annotations

from datetime import UTC, datetime
from typing import cast
from unittest.mock import MagicMock

import pytest
from flask import Flask

from taskdesk.application.services.session_cookies import SessionCookieCodec
from taskdesk.application.use_cases.users.login_user import LoginResult
from taskdesk.application.use_cases.users.register_user import RegisterUserUseCase
from taskdesk.domain.users.entities import UserProfile
from taskdesk.interfaces.http.controllers.auth_controller import AuthController
from taskdesk.shared.errors import register_error_handler

PROFILE = UserProfile(
    id="u1",
    name="Alice",
    email="alice@x.com",
    created_at=datetime(2026, 1, 1, tzinfo=UTC),
)


@pytest.fixture()
def flask_app() -> Flask:
    app = Flask(__name__)
    register_error_handler(app)
    return app


@pytest.fixture()
def cookies() -> SessionCookieCodec:
    return SessionCookieCodec(secure=True, max_age=3600)


def _controller(cookies: SessionCookieCodec, **overrides) -> AuthController:
    deps = {
        "register_use_case": MagicMock(),
        "login_use_case": MagicMock(),
        "logout_use_case": MagicMock(),
        "resolve_session_use_case": MagicMock(),
        "cookies": cookies,
    }
    deps.update(overrides)
    return AuthController(**deps)


def test_register_endpoint_does_not_set_cookie(
    flask_app: Flask, cookies: SessionCookieCodec
) -> None:
    register_called: dict[str, tuple[str, str, str]] = {}

    class StubRegister:
        def execute(self, name: str, email: str, password: str) -> UserProfile:
            register_called["args"] = (name, email, password)
            return PROFILE

    controller = _controller(
        cookies, register_use_case=cast(RegisterUserUseCase, StubRegister())
    )
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post(
            "/api/auth/register",
            json={"name": "Alice", "email": "alice@x.com", "password": "secret123"},
        )

    assert response.status_code == 201
    assert register_called["args"] == ("Alice", "alice@x.com", "secret123")
    assert response.get_json()["user"]["createdAt"].startswith("2026-01-01T00:00:00")
    assert "Set-Cookie" not in response.headers


def test_login_endpoint_applies_cookie(flask_app: Flask, cookies: SessionCookieCodec) -> None:
    login = MagicMock()
    login.execute.return_value = LoginResult(
        user=PROFILE, token="signed-token", cookie=cookies.encode("signed-token")
    )
    flask_app.register_blueprint(_controller(cookies, login_use_case=login).as_blueprint())

    with flask_app.test_client() as client:
        response = client.post(
            "/api/auth/login", json={"email": "alice@x.com", "password": "secret123"}
        )

    login.execute.assert_called_once_with("alice@x.com", "secret123")
    assert response.status_code == 200
    header = response.headers["Set-Cookie"]
    assert header.startswith("auth_token=signed-token;")
    assert "Secure" in header
    assert "Max-Age=3600" in header


def test_login_invalid_payload_returns_422(flask_app: Flask, cookies: SessionCookieCodec) -> None:
    login = MagicMock()
    flask_app.register_blueprint(_controller(cookies, login_use_case=login).as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/api/auth/login", json={"email": 42})

    assert response.status_code == 422
    payload = response.get_json()
    assert payload["error"] == "validation_error"
    assert payload["context"]["fields"] == ["email"]
    login.execute.assert_not_called()


def test_me_passes_cookie_to_resolver(flask_app: Flask, cookies: SessionCookieCodec) -> None:
    resolve = MagicMock()
    resolve.current_user.return_value = PROFILE
    flask_app.register_blueprint(
        _controller(cookies, resolve_session_use_case=resolve).as_blueprint()
    )

    with flask_app.test_client() as client:
        client.set_cookie("auth_token", "abc")
        response = client.get("/api/auth/me")

    resolve.current_user.assert_called_once_with("abc")
    assert response.status_code == 200
    assert response.get_json()["user"]["id"] == "u1"

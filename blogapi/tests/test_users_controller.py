from __future__ import annotations

from typing import cast
from unittest.mock import MagicMock

import pytest
from flask import Flask

from blogapi.application.use_cases.users.login_user import LoginUserUseCase
from blogapi.application.use_cases.users.register_user import \
    RegisterUserUseCase
from blogapi.domain.results import Err, Ok
from blogapi.domain.users.entities import LoginSession, PublicUser
from blogapi.domain.users.exceptions import (DuplicateUserError,
                                             InvalidCredentialsError,
                                             UserNotFoundError)
from blogapi.infrastructure.auth import SessionGuard
from blogapi.infrastructure.sessions import InMemorySessionStore
from blogapi.interfaces.http.controllers.users_controller import UsersController
from blogapi.interfaces.http.session_cookie import SessionCookie
from blogapi.shared.config import SessionConfig
from blogapi.shared.middleware.error_handler import configure_error_handling


@pytest.fixture()
def cookie() -> SessionCookie:
    return SessionCookie(secret_key="controller-secret", config=SessionConfig(SESSION_BACKEND="memory"))


def _app(cookie: SessionCookie, *, register=None, login=None, logout=None) -> Flask:
    app = Flask(__name__)
    configure_error_handling(app)
    controller = UsersController(
        register_use_case=cast(RegisterUserUseCase, register or MagicMock()),
        login_use_case=cast(LoginUserUseCase, login or MagicMock()),
        logout_use_case=logout or MagicMock(),
        session_cookie=cookie,
        session_guard=SessionGuard(sessions=InMemorySessionStore(), cookie=cookie),
    )
    app.register_blueprint(controller.as_blueprint())
    return app


def test_signup_returns_username_only(cookie: SessionCookie) -> None:
    register_called: dict[str, tuple[str, str]] = {}

    class StubRegister:
        def execute(self, username: str, password: str):
            register_called["args"] = (username, password)
            return Ok(PublicUser(username=username))

    app = _app(cookie, register=StubRegister())
    with app.test_client() as client:
        response = client.post("/users/signup", json={"username": "alice", "password": "secret1"})

    assert response.status_code == 200
    assert register_called["args"] == ("alice", "secret1")
    assert response.get_json() == {"status": "success", "data": {"user": {"username": "alice"}}}
    assert "Set-Cookie" not in response.headers


def test_signup_duplicate_is_generic_failure(cookie: SessionCookie) -> None:
    register = MagicMock()
    register.execute.return_value = Err(DuplicateUserError())

    app = _app(cookie, register=register)
    with app.test_client() as client:
        response = client.post("/users/signup", json={"username": "alice", "password": "secret1"})

    assert response.status_code == 400
    assert response.get_json() == {"status": "fail"}


@pytest.mark.parametrize(
    ("payload", "errors"),
    [
        ({}, [("username", "missing"), ("password", "missing")]),
        ({"username": "alice"}, [("password", "missing")]),
        ({"password": "secret1"}, [("username", "missing")]),
        ({"username": "", "password": "x"}, [("username", "string_too_short")]),
    ],
)
def test_signup_missing_fields_returns_400(
    cookie: SessionCookie, payload: dict, errors: list[tuple[str, str]]
) -> None:
    register = MagicMock()
    app = _app(cookie, register=register)

    with app.test_client() as client:
        response = client.post("/users/signup", json=payload)

    assert response.status_code == 400
    assert response.get_json() == {
        "status": "fail",
        "message": "invalid input",
        "context": {
            "fields": sorted(field for field, _ in errors),
            "errors": [{"field": field, "type": kind} for field, kind in errors],
        },
    }
    register.execute.assert_not_called()


def test_login_sets_signed_session_cookie(cookie: SessionCookie) -> None:
    login = MagicMock()
    login.execute.return_value = Ok(
        LoginSession(session_id="sid-123", user=PublicUser(username="alice"))
    )

    app = _app(cookie, login=login)
    with app.test_client() as client:
        response = client.post("/users/login", json={"username": "alice", "password": "secret1"})
        stored = client.get_cookie("sid")

    assert response.status_code == 200
    assert response.get_json() == {"status": "success"}
    assert "HttpOnly" in response.headers["Set-Cookie"]
    assert stored is not None
    assert stored.value != "sid-123"
    assert stored.value == cookie.sign("sid-123")


@pytest.mark.parametrize(
    ("error", "status", "message"),
    [
        (UserNotFoundError(), 404, "user not found"),
        (InvalidCredentialsError(), 400, "incorrect username or password"),
    ],
)
def test_login_failures(cookie: SessionCookie, error, status: int, message: str) -> None:
    login = MagicMock()
    login.execute.return_value = Err(error)

    app = _app(cookie, login=login)
    with app.test_client() as client:
        response = client.post("/users/login", json={"username": "alice", "password": "nope"})

    assert response.status_code == status
    assert response.get_json() == {"status": "fail", "message": message}
    assert "Set-Cookie" not in response.headers


def test_logout_passes_session_id_and_clears_cookie(cookie: SessionCookie) -> None:
    logout = MagicMock()

    app = _app(cookie, logout=logout)
    with app.test_client() as client:
        client.set_cookie("sid", cookie.sign("sid-123"))
        response = client.post("/users/logout")

        assert client.get_cookie("sid") is None

    assert response.status_code == 200
    logout.execute.assert_called_once_with("sid-123")


def test_me_requires_session(cookie: SessionCookie) -> None:
    app = _app(cookie)

    with app.test_client() as client:
        response = client.get("/users/me")

    assert response.status_code == 401
    assert response.get_json() == {"status": "fail", "message": "unauthorized"}

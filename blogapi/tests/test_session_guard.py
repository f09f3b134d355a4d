from __future__ import annotations

import pytest
from flask import Blueprint, Flask, jsonify

from blogapi.domain.results import Err, Ok
from blogapi.domain.users.entities import SessionData, SessionUser
from blogapi.domain.users.exceptions import UnauthorizedError
from blogapi.infrastructure.auth import RequestContext, SessionGuard
from blogapi.infrastructure.sessions import InMemorySessionStore
from blogapi.interfaces.http.session_cookie import SessionCookie
from blogapi.shared.config import SessionConfig
from blogapi.shared.middleware.error_handler import configure_error_handling


@pytest.fixture()
def store(clock) -> InMemorySessionStore:
    return InMemorySessionStore(clock=clock)


@pytest.fixture()
def cookie() -> SessionCookie:
    return SessionCookie(secret_key="guard-secret", config=SessionConfig(SESSION_BACKEND="memory"))


@pytest.fixture()
def guard(store: InMemorySessionStore, cookie: SessionCookie) -> SessionGuard:
    return SessionGuard(sessions=store, cookie=cookie)


@pytest.fixture()
def calls() -> list[RequestContext]:
    return []


@pytest.fixture()
def flask_app(guard: SessionGuard, calls: list[RequestContext]) -> Flask:
    app = Flask(__name__)
    configure_error_handling(app)

    def secret(ctx: RequestContext):
        calls.append(ctx)
        return jsonify({"user": ctx.user.username})

    bp = Blueprint("guarded", __name__)
    bp.add_url_rule("/secret", view_func=guard.protect(secret), methods=["GET"])
    app.register_blueprint(bp)
    return app


def test_resolve_live_session(guard: SessionGuard, store: InMemorySessionStore) -> None:
    user = SessionUser(id=1, username="alice")
    store.create("sid-1", SessionData(user=user), ttl_seconds=30)

    result = guard.resolve("sid-1")

    assert result == Ok(RequestContext(session_id="sid-1", user=user))


@pytest.mark.parametrize("session_id", [None, "", "unknown"])
def test_resolve_without_session(guard: SessionGuard, session_id: str | None) -> None:
    result = guard.resolve(session_id)

    assert isinstance(result, Err)
    assert isinstance(result.error, UnauthorizedError)


def test_resolve_payload_without_user(guard: SessionGuard, store: InMemorySessionStore) -> None:
    store.create("sid-1", SessionData(user=None), ttl_seconds=30)

    assert isinstance(guard.resolve("sid-1"), Err)


def test_resolve_expired_session(guard: SessionGuard, store: InMemorySessionStore, clock) -> None:
    store.create("sid-1", SessionData(user=SessionUser(id=1, username="alice")), ttl_seconds=30)
    clock.advance(31)

    assert isinstance(guard.resolve("sid-1"), Err)


def test_request_without_cookie_is_rejected(flask_app: Flask, calls: list) -> None:
    with flask_app.test_client() as client:
        response = client.get("/secret")

    assert response.status_code == 401
    assert response.get_json() == {"status": "fail", "message": "unauthorized"}
    assert calls == []


def test_request_with_forged_cookie_is_rejected(flask_app: Flask, calls: list) -> None:
    forged = SessionCookie(secret_key="other-secret", config=SessionConfig(SESSION_BACKEND="memory"))

    with flask_app.test_client() as client:
        client.set_cookie("sid", forged.sign("sid-1"))
        response = client.get("/secret")

    assert response.status_code == 401
    assert calls == []


def test_request_with_live_session_reaches_view(
    flask_app: Flask,
    calls: list,
    store: InMemorySessionStore,
    cookie: SessionCookie,
) -> None:
    store.create("sid-1", SessionData(user=SessionUser(id=7, username="alice")), ttl_seconds=30)

    with flask_app.test_client() as client:
        client.set_cookie("sid", cookie.sign("sid-1"))
        response = client.get("/secret")

    assert response.status_code == 200
    assert response.get_json() == {"user": "alice"}
    assert [ctx.user.id for ctx in calls] == [7]

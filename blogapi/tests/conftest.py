from __future__ import annotations

from collections.abc import Iterator

import pytest
from flask import Flask
from flask.testing import FlaskClient

from blogapi.app import create_app
from blogapi.container import Container
from blogapi.infrastructure.db import Database
from blogapi.shared.config import AppConfig, DatabaseConfig, SessionConfig


class FakeClock:
    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture()
def config() -> AppConfig:
    return AppConfig(
        APP_ENV="test",
        SECRET_KEY="test-secret-key-0123456789",
        PASSWORD_HASH_METHOD="pbkdf2:sha256:1000",
        database=DatabaseConfig(DATABASE_URL="sqlite://"),
        sessions=SessionConfig(SESSION_BACKEND="memory", SESSION_TTL=60),
    )


@pytest.fixture()
def database(config: AppConfig) -> Iterator[Database]:
    db = Database(config.database)
    db.init_schema()
    yield db
    db.drop_schema()
    db.dispose()


@pytest.fixture()
def container(config: AppConfig) -> Iterator[Container]:
    container = Container(config)
    yield container
    container.database.dispose()


@pytest.fixture()
def app(container: Container) -> Flask:
    return create_app(container)


@pytest.fixture()
def client(app: Flask) -> Iterator[FlaskClient]:
    with app.test_client() as client:
        yield client


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()

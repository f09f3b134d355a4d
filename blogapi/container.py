"""Application dependency container."""

from __future__ import annotations

from functools import cached_property

from blogapi.application.services.password_hashing import WerkzeugPasswordHasher
from blogapi.application.use_cases.users.login_user import LoginUserUseCase
from blogapi.application.use_cases.users.logout_user import LogoutUserUseCase
from blogapi.application.use_cases.users.register_user import RegisterUserUseCase
from blogapi.domain.users.repositories import SessionStore
from blogapi.infrastructure.auth import SessionGuard
from blogapi.infrastructure.db import Database
from blogapi.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from blogapi.infrastructure.sessions import build_session_store
from blogapi.interfaces.http.controllers.misc_controller import MiscController
from blogapi.interfaces.http.controllers.users_controller import UsersController
from blogapi.interfaces.http.session_cookie import SessionCookie
from blogapi.shared.config import AppConfig, load_config


class Container:
    def __init__(self, config: AppConfig | None = None) -> None:
        self.config = config or load_config()

    @cached_property
    def database(self) -> Database:
        return Database(self.config.database)

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher(method=self.config.password_hash_method)

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self.database)

    @cached_property
    def session_store(self) -> SessionStore:
        return build_session_store(self.config.sessions)

    @cached_property
    def session_cookie(self) -> SessionCookie:
        return SessionCookie(secret_key=self.config.secret_key, config=self.config.sessions)

    @cached_property
    def session_guard(self) -> SessionGuard:
        return SessionGuard(sessions=self.session_store, cookie=self.session_cookie)

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            sessions=self.session_store,
            password_hasher=self.password_hasher,
            ttl_seconds=self.config.sessions.ttl_seconds,
        )

    @cached_property
    def logout_user_use_case(self) -> LogoutUserUseCase:
        return LogoutUserUseCase(sessions=self.session_store)

    @cached_property
    def users_controller(self) -> UsersController:
        return UsersController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            logout_use_case=self.logout_user_use_case,
            session_cookie=self.session_cookie,
            session_guard=self.session_guard,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(database=self.database, sessions=self.session_store)

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import TypeVar

from flask import Blueprint, Response, jsonify, request
from pydantic import BaseModel, ValidationError

from blogapi.application.use_cases.users.login_user import LoginUserUseCase
from blogapi.application.use_cases.users.logout_user import LogoutUserUseCase
from blogapi.application.use_cases.users.register_user import \
    RegisterUserUseCase
from blogapi.domain.results import Err
from blogapi.domain.users.entities import PublicUser
from blogapi.infrastructure.auth import RequestContext, SessionGuard
from blogapi.interfaces.http.dto.users import (LoginRequestDTO,
                                               SignupRequestDTO, SuccessDTO,
                                               UserEnvelopeDTO)
from blogapi.interfaces.http.session_cookie import SessionCookie
from blogapi.shared.errors import handle_app_error
from blogapi.shared.errors.validation import raise_validation_error
from blogapi.shared.logging import logger


DTO = TypeVar("DTO", bound=BaseModel)


def _parse(dto_cls: type[DTO]) -> DTO:
    try:
        return dto_cls.model_validate(request.get_json(silent=True) or {})
    except ValidationError as exc:
        raise_validation_error(exc)


class UsersController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        logout_use_case: LogoutUserUseCase,
        session_cookie: SessionCookie,
        session_guard: SessionGuard,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._logout_use_case = logout_use_case
        self._session_cookie = session_cookie
        self._session_guard = session_guard

    def signup(self) -> tuple[Response, int]:
        dto = _parse(SignupRequestDTO)

        result = self._register_use_case.execute(dto.username, dto.password)
        if isinstance(result, Err):
            return handle_app_error(result.error)

        # no session here: the client logs in with a separate call
        return jsonify(UserEnvelopeDTO.for_user(result.value).model_dump()), 200

    def login(self) -> tuple[Response, int]:
        dto = _parse(LoginRequestDTO)

        result = self._login_use_case.execute(dto.username, dto.password)
        if isinstance(result, Err):
            return handle_app_error(result.error)

        response = jsonify(SuccessDTO().model_dump())
        self._session_cookie.issue(response, result.value.session_id)
        return response, 200

    def logout(self) -> tuple[Response, int]:
        self._logout_use_case.execute(self._session_cookie.read(request))

        response = jsonify(SuccessDTO().model_dump())
        self._session_cookie.clear(response)
        logger.info("auth.logout: ok")
        return response, 200

    def me(self, ctx: RequestContext) -> tuple[Response, int]:
        user = PublicUser(username=ctx.user.username)
        return jsonify(UserEnvelopeDTO.for_user(user).model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("users", __name__, url_prefix="/users")
        bp.add_url_rule("/signup", view_func=self.signup, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/logout", view_func=self.logout, methods=["POST"])
        bp.add_url_rule(
            "/me", view_func=self._session_guard.protect(self.me), methods=["GET"]
        )
        return bp

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from functools import wraps
from typing import Any

from flask import request

from blogapi.domain.results import Err, Ok, Result
from blogapi.domain.users.entities import SessionUser
from blogapi.domain.users.exceptions import UnauthorizedError
from blogapi.domain.users.repositories import SessionStore
from blogapi.interfaces.http.session_cookie import SessionCookie
from blogapi.shared.errors import handle_app_error
from blogapi.shared.logging import logger


@dataclass(slots=True, frozen=True)
class RequestContext:
    """Authenticated identity handed to protected views."""

    session_id: str
    user: SessionUser


class SessionGuard:
    def __init__(self, *, sessions: SessionStore, cookie: SessionCookie) -> None:
        self._sessions = sessions
        self._cookie = cookie

    def resolve(self, session_id: str | None) -> Result[RequestContext]:
        if not session_id:
            return Err(UnauthorizedError())
        data = self._sessions.get(session_id)
        if data is None or data.user is None:
            return Err(UnauthorizedError())
        return Ok(RequestContext(session_id=session_id, user=data.user))

    def protect(self, view: Callable[..., Any]) -> Callable[..., Any]:
        """Run ``view`` only for requests with a live session.

        The view receives the resolved identity as the ``ctx`` keyword argument.
        """

        @wraps(view)
        def inner(*args: Any, **kwargs: Any) -> Any:
            result = self.resolve(self._cookie.read(request))
            if isinstance(result, Err):
                logger.warning(
                    f"Auth failed (no live session) on {request.method} {request.path} "
                    f"from {request.headers.get('X-Forwarded-For', request.remote_addr)}"
                )
                return handle_app_error(result.error)

            kwargs["ctx"] = result.value
            logger.debug(f"Auth OK: user={result.value.user.id} {request.method} {request.path}")
            return view(*args, **kwargs)

        return inner


__all__ = ["RequestContext", "SessionGuard"]

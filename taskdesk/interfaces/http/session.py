# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import g, request

from taskdesk.application.services.session_cookies import SessionCookieCodec
from taskdesk.application.use_cases.users.resolve_session import ResolveSessionUseCase
from taskdesk.domain.users.exceptions import AuthenticationRequiredError
from taskdesk.shared.logging import logger, set_log_user


class RequestSession:
    """Reads the session cookie of the current Flask request."""

    def __init__(
        self,
        *,
        cookies: SessionCookieCodec,
        resolve_session: ResolveSessionUseCase,
    ) -> None:
        self._cookies = cookies
        self._resolve_session = resolve_session

    def raw_token(self) -> str | None:
        return self._cookies.extract(request.cookies)

    def user_id(self) -> str | None:
        token = self.raw_token()
        if not token:
            logger.debug(f"No session cookie on {request.method} {request.path}")
            g.user_id = None
            return None

        user_id = self._resolve_session.execute(token)
        if user_id is None:
            logger.warning(
                f"Auth failed (token invalid/expired) on {request.method} {request.path}"
            )
        g.user_id = user_id
        set_log_user(user_id)
        return user_id

    def require_user_id(self) -> str:
        user_id = self.user_id()
        if user_id is None:
            raise AuthenticationRequiredError()
        return user_id

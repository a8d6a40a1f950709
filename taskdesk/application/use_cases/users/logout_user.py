"""Use-case for ending a browser session."""

from __future__ import annotations

from taskdesk.application.services.session_cookies import SessionCookie, SessionCookieCodec


class LogoutUserUseCase:
    """Tokens are not tracked server-side; logging out only drops the cookie."""

    def __init__(self, *, cookies: SessionCookieCodec) -> None:
        self._cookies = cookies

    def execute(self) -> SessionCookie:
        return self._cookies.clear()

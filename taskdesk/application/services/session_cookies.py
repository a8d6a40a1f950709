# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Session cookie attribute sets."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol

COOKIE_NAME = "auth_token"
DEFAULT_MAX_AGE = 60 * 60 * 24 * 7


class CookieSink(Protocol):
    def set_cookie(self, key: str, value: str = "", **kwargs: Any) -> None: ...


@dataclass(slots=True, frozen=True)
class SessionCookie:

    name: str
    value: str
    max_age: int
    secure: bool
    httponly: bool = True
    samesite: str = "Lax"
    path: str = "/"

    @property
    def expired(self) -> bool:
        return self.max_age <= 0

    def apply(self, response: CookieSink) -> None:
        response.set_cookie(
            self.name,
            self.value,
            max_age=self.max_age,
            # An epoch expiry forces removal on clients that ignore Max-Age=0.
            expires=0 if self.expired else None,
            path=self.path,
            secure=self.secure,
            httponly=self.httponly,
            samesite=self.samesite,
        )


class SessionCookieCodec:
    def __init__(
        self,
        *,
        secure: bool,
        max_age: int = DEFAULT_MAX_AGE,
        name: str = COOKIE_NAME,
    ) -> None:
        self._secure = secure
        self._max_age = max_age
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def encode(self, token: str) -> SessionCookie:
        return SessionCookie(
            name=self._name,
            value=token,
            max_age=self._max_age,
            secure=self._secure,
        )

    def clear(self) -> SessionCookie:
        return SessionCookie(name=self._name, value="", max_age=0, secure=self._secure)

    def extract(self, cookies: Mapping[str, str]) -> str | None:
        value = (cookies.get(self._name) or "").strip()
        return value or None

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets
from dataclasses import dataclass

from taskdesk.application.services.session_cookies import SessionCookie, SessionCookieCodec
from taskdesk.domain.users.entities import UserProfile
from taskdesk.domain.users.exceptions import InvalidCredentialsError
from taskdesk.domain.users.repositories import (
    PasswordHasher,
    SessionTokenCodec,
    UserRepository,
)
from taskdesk.shared.logging import logger


@dataclass(slots=True, frozen=True)
class LoginResult:

    user: UserProfile
    token: str
    cookie: SessionCookie


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: SessionTokenCodec,
        cookies: SessionCookieCodec,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._cookies = cookies
        self._password_hasher = password_hasher
        self._decoy: str | None = None

    def _decoy_digest(self) -> str:
        if self._decoy is None:
            self._decoy = self._password_hasher.hash(secrets.token_urlsafe(16))
        return self._decoy

    def execute(self, email: str, password: str) -> LoginResult:
        user = self._users.find_user_by_email(email) if email else None
        # Unknown emails are checked against a decoy digest, same cost as a real one.
        digest = user.password_hash if user else self._decoy_digest()
        password_valid = self._password_hasher.verify(password, digest)

        if user is None or not password_valid:
            logger.warning("auth.login: rejected credentials")
            raise InvalidCredentialsError()

        token = self._tokens.issue(user.id)
        logger.info(f"auth.login: ok user_id={user.id}")
        return LoginResult(user=user.profile(), token=token, cookie=self._cookies.encode(token))

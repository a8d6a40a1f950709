# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Signed, expiring session tokens."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from itsdangerous import BadData, URLSafeTimedSerializer

from taskdesk.domain.users.repositories import SessionTokenCodec
from taskdesk.shared.logging import logger

DEFAULT_LIFETIME = timedelta(days=7)
_SALT = "taskdesk.session.v1"


def _utcnow() -> datetime:
    return datetime.now(UTC)


class SignedSessionTokenCodec(SessionTokenCodec):
    """Binds a user id to an absolute expiry under the process secret.

    There is no server-side revocation: a token is valid exactly as long as its
    signature checks out and its expiry lies in the future. Rotating the secret
    invalidates every outstanding token.
    """

    def __init__(
        self,
        secret_key: str,
        *,
        lifetime: timedelta = DEFAULT_LIFETIME,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        if not secret_key:
            raise ValueError("secret_key must not be empty")
        self._serializer = URLSafeTimedSerializer(secret_key=secret_key, salt=_SALT)
        self._lifetime = lifetime
        self._clock = clock

    @property
    def lifetime(self) -> timedelta:
        return self._lifetime

    def issue(self, user_id: str) -> str:
        expires_at = self._clock() + self._lifetime
        return self._serializer.dumps({"u": user_id, "exp": int(expires_at.timestamp())})

    def verify(self, token: str | None) -> str | None:
        if not token:
            return None
        try:
            data = self._serializer.loads(token)
        except BadData:
            logger.debug("session token rejected: bad signature or payload")
            return None

        if not isinstance(data, dict):
            return None
        user_id = data.get("u")
        expires_at = data.get("exp")
        if not isinstance(user_id, str) or not user_id:
            return None
        if not isinstance(expires_at, int) or isinstance(expires_at, bool):
            return None
        if expires_at <= self._clock().timestamp():
            logger.debug(f"session token expired for user={user_id}")
            return None
        return user_id

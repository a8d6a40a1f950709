# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from taskdesk.domain.users.entities import UserProfile
from taskdesk.domain.users.repositories import SessionTokenCodec, UserRepository
from taskdesk.shared.logging import logger


class ResolveSessionUseCase:
    """Turn a raw cookie value into the authenticated user, or ``None``.

    An absent cookie, a bad or expired token, and a token pointing at a user
    that no longer exists all resolve to anonymous.
    """

    def __init__(self, *, users: UserRepository, tokens: SessionTokenCodec) -> None:
        self._users = users
        self._tokens = tokens

    def current_user(self, raw_cookie_value: str | None) -> UserProfile | None:
        user_id = self._tokens.verify(raw_cookie_value)
        if user_id is None:
            return None
        user = self._users.find_user_by_id(user_id)
        if user is None:
            logger.warning(f"auth.session: token for unknown user_id={user_id}")
            return None
        return user.profile()

    def execute(self, raw_cookie_value: str | None) -> str | None:
        profile = self.current_user(raw_cookie_value)
        return profile.id if profile else None

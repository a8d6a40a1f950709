# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from taskdesk.domain.users.entities import NewUser, UserProfile
from taskdesk.domain.users.exceptions import UserAlreadyExistsError
from taskdesk.domain.users.repositories import PasswordHasher, UserRepository
from taskdesk.shared.errors.base import ValidationError, field_errors
from taskdesk.shared.logging import logger

MIN_PASSWORD_LENGTH = 6


class RegisterUserUseCase:
    """Create an account. Registration never opens a session."""

    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, name: str, email: str, password: str) -> UserProfile:
        missing = [
            (field, "missing", None)
            for field, value in (("name", name), ("email", email), ("password", password))
            if not value or not value.strip()
        ]
        if missing:
            raise ValidationError(context=field_errors(*missing))
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError.for_field(
                "password", "password_too_short", {"min_length": MIN_PASSWORD_LENGTH}
            )

        if self._users.find_user_by_email(email):
            raise UserAlreadyExistsError()

        hashed = self._password_hasher.hash(password)
        user = self._users.create_user(NewUser(name=name, email=email, password_hash=hashed))
        logger.info(f"auth.register: created user_id={user.id}")
        return user.profile()

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import NewUser, User


class UserRepository(Protocol):
    def find_user_by_email(self, email: str) -> User | None: ...
    def find_user_by_id(self, user_id: str) -> User | None: ...
    def create_user(self, fields: NewUser) -> User: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...


class SessionTokenCodec(Protocol):
    def issue(self, user_id: str) -> str: ...
    def verify(self, token: str | None) -> str | None: ...

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class User:

    id: str
    name: str
    email: str
    password_hash: str
    created_at: datetime

    def profile(self) -> UserProfile:
        return UserProfile(
            id=self.id,
            name=self.name,
            email=self.email,
            created_at=self.created_at,
        )


@dataclass(slots=True, frozen=True)
class UserProfile:
    """User as exposed to clients; never carries the password hash."""

    id: str
    name: str
    email: str
    created_at: datetime


@dataclass(slots=True, frozen=True)
class NewUser:

    name: str
    email: str
    password_hash: str

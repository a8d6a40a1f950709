# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import NewUser, User, UserProfile
from .exceptions import (
    AuthenticationRequiredError,
    InvalidCredentialsError,
    UserAlreadyExistsError,
)

__all__ = [
    "AuthenticationRequiredError",
    "InvalidCredentialsError",
    "NewUser",
    "User",
    "UserAlreadyExistsError",
    "UserProfile",
]

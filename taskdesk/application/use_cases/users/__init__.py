# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .login_user import LoginResult, LoginUserUseCase
from .logout_user import LogoutUserUseCase
from .register_user import MIN_PASSWORD_LENGTH, RegisterUserUseCase
from .resolve_session import ResolveSessionUseCase

__all__ = [
    "LoginResult",
    "LoginUserUseCase",
    "LogoutUserUseCase",
    "MIN_PASSWORD_LENGTH",
    "RegisterUserUseCase",
    "ResolveSessionUseCase",
]

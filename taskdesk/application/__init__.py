# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .use_cases.tasks import (
    CreateTaskUseCase,
    DeleteTaskUseCase,
    GetTaskUseCase,
    ListTasksUseCase,
    SummarizeTasksUseCase,
    UpdateTaskUseCase,
)
from .use_cases.users import (
    LoginResult,
    LoginUserUseCase,
    LogoutUserUseCase,
    RegisterUserUseCase,
    ResolveSessionUseCase,
)

__all__ = [
    "CreateTaskUseCase",
    "DeleteTaskUseCase",
    "GetTaskUseCase",
    "ListTasksUseCase",
    "LoginResult",
    "LoginUserUseCase",
    "LogoutUserUseCase",
    "RegisterUserUseCase",
    "ResolveSessionUseCase",
    "SummarizeTasksUseCase",
    "UpdateTaskUseCase",
]

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .create_task import CreateTaskUseCase
from .delete_task import DeleteTaskUseCase
from .get_task import GetTaskUseCase
from .list_tasks import ListTasksUseCase
from .summarize_tasks import SummarizeTasksUseCase
from .update_task import UpdateTaskUseCase

__all__ = [
    "CreateTaskUseCase",
    "DeleteTaskUseCase",
    "GetTaskUseCase",
    "ListTasksUseCase",
    "SummarizeTasksUseCase",
    "UpdateTaskUseCase",
]

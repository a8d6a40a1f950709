# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from taskdesk.domain.tasks.entities import Task
from taskdesk.domain.tasks.exceptions import TaskNotFoundError
from taskdesk.domain.tasks.repositories import TaskRepository

from ._validation import require_owner


class GetTaskUseCase:
    def __init__(self, *, tasks: TaskRepository) -> None:
        self._tasks = tasks

    def execute(self, user_id: str | None, task_id: str) -> Task:
        owner = require_owner(user_id)
        task = self._tasks.find_task_by_id(task_id, owner)
        if task is None:
            raise TaskNotFoundError()
        return task

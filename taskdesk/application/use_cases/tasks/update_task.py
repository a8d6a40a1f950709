# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from taskdesk.domain.tasks.entities import Task
from taskdesk.domain.tasks.exceptions import TaskNotFoundError
from taskdesk.domain.tasks.repositories import TaskRepository

from ._validation import clean_changes, require_owner


class UpdateTaskUseCase:
    def __init__(self, *, tasks: TaskRepository) -> None:
        self._tasks = tasks

    def execute(self, user_id: str | None, task_id: str, changes: Mapping[str, Any]) -> Task:
        owner = require_owner(user_id)
        task = self._tasks.update_task(task_id, clean_changes(changes), owner)
        if task is None:
            raise TaskNotFoundError()
        return task

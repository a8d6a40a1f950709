# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from taskdesk.domain.tasks.entities import Task, TaskFilter
from taskdesk.domain.tasks.repositories import TaskRepository

from ._validation import require_owner


class ListTasksUseCase:
    def __init__(self, *, tasks: TaskRepository) -> None:
        self._tasks = tasks

    def execute(self, user_id: str | None, filters: TaskFilter | None = None) -> list[Task]:
        owner = require_owner(user_id)
        filters = filters or TaskFilter()

        if filters.completed is not None:
            return self._tasks.list_tasks_by_completion(filters.completed, owner)
        if filters.category:
            return self._tasks.list_tasks_by_category(filters.category, owner)
        if filters.priority:
            return self._tasks.list_tasks_by_priority(filters.priority, owner)
        return self._tasks.list_tasks(owner)

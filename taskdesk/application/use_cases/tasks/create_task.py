# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from taskdesk.domain.tasks.entities import DEFAULT_CATEGORY, DEFAULT_PRIORITY, NewTask, Task
from taskdesk.domain.tasks.repositories import TaskRepository
from taskdesk.shared.logging import logger

from ._validation import clean_category, clean_priority, clean_title, require_owner


class CreateTaskUseCase:
    def __init__(self, *, tasks: TaskRepository) -> None:
        self._tasks = tasks

    def execute(self, user_id: str | None, fields: Mapping[str, Any]) -> Task:
        owner = require_owner(user_id)
        due_date = fields.get("due_date")
        new_task = NewTask(
            title=clean_title(fields.get("title")),
            description=str(fields.get("description") or ""),
            category=clean_category(fields.get("category") or DEFAULT_CATEGORY),
            priority=clean_priority(fields.get("priority") or DEFAULT_PRIORITY),
            due_date=str(due_date) if due_date else None,
        )
        task = self._tasks.create_task(new_task, owner)
        logger.info(f"tasks.create: id={task.id} user_id={owner}")
        return task

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from taskdesk.domain.tasks.repositories import TaskRepository
from taskdesk.shared.logging import logger

from ._validation import require_owner


class DeleteTaskUseCase:
    def __init__(self, *, tasks: TaskRepository) -> None:
        self._tasks = tasks

    def execute(self, user_id: str | None, task_id: str) -> bool:
        owner = require_owner(user_id)
        removed = self._tasks.delete_task(task_id, owner)
        logger.info(f"tasks.delete: id={task_id} user_id={owner} removed={removed}")
        return removed

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

from taskdesk.domain.tasks.entities import Task, TaskSummary
from taskdesk.domain.tasks.repositories import TaskRepository

from ._validation import require_owner


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _is_overdue(task: Task, now: datetime) -> bool:
    if task.completed or not task.due_date:
        return False
    try:
        due = datetime.fromisoformat(task.due_date)
    except ValueError:
        return False
    # Due dates are stored as given; compare naive values against naive "now".
    reference = now if due.tzinfo else now.replace(tzinfo=None)
    return due < reference


class SummarizeTasksUseCase:
    """Dashboard counters for the caller's tasks."""

    def __init__(
        self,
        *,
        tasks: TaskRepository,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._tasks = tasks
        self._clock = clock

    def execute(self, user_id: str | None) -> TaskSummary:
        owner = require_owner(user_id)
        tasks = self._tasks.list_tasks(owner)
        now = self._clock()
        completed = sum(1 for t in tasks if t.completed)
        return TaskSummary(
            total=len(tasks),
            completed=completed,
            pending=len(tasks) - completed,
            high_priority=sum(1 for t in tasks if t.priority == "high" and not t.completed),
            overdue=sum(1 for t in tasks if _is_overdue(t, now)),
        )

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

from .entities import NewTask, Task


class TaskRepository(Protocol):
    def list_tasks(self, owner_id: str | None = None) -> list[Task]: ...
    def find_task_by_id(self, task_id: str, owner_id: str | None = None) -> Task | None: ...
    def list_tasks_by_completion(
        self, completed: bool, owner_id: str | None = None
    ) -> list[Task]: ...
    def list_tasks_by_category(self, category: str, owner_id: str | None = None) -> list[Task]: ...
    def list_tasks_by_priority(self, priority: str, owner_id: str | None = None) -> list[Task]: ...
    def create_task(self, fields: NewTask, owner_id: str) -> Task: ...
    def update_task(
        self, task_id: str, changes: Mapping[str, Any], owner_id: str | None = None
    ) -> Task | None: ...
    def delete_task(self, task_id: str, owner_id: str | None = None) -> bool: ...

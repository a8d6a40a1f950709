# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Task entities and the vocabulary shared by the task use cases."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from taskdesk.domain.exceptions import InvariantViolation

PRIORITIES = ("low", "medium", "high", "urgent")

# Default vocabulary only; the store accepts any tag.
CATEGORIES = (
    "development",
    "design",
    "marketing",
    "sales",
    "hr",
    "finance",
    "meeting",
    "planning",
    "review",
    "other",
)

DEFAULT_CATEGORY = "other"
DEFAULT_PRIORITY = "medium"

# Fields a caller may change after creation.
MUTABLE_FIELDS = ("title", "description", "completed", "category", "priority", "due_date")


@dataclass(slots=True, frozen=True)
class Task:
    """A unit of work owned by exactly one user."""

    id: str
    user_id: str
    title: str
    description: str
    completed: bool
    category: str
    priority: str
    due_date: str | None
    created_at: datetime
    updated_at: datetime

    def __post_init__(self) -> None:
        if self.updated_at < self.created_at:
            raise InvariantViolation("updated_at must be >= created_at", field="updated_at")

    def owned_by(self, owner_id: str | None) -> bool:
        return owner_id is None or self.user_id == owner_id


@dataclass(slots=True, frozen=True)
class NewTask:

    title: str
    description: str = ""
    completed: bool = False
    category: str = DEFAULT_CATEGORY
    priority: str = DEFAULT_PRIORITY
    due_date: str | None = None


@dataclass(slots=True, frozen=True)
class TaskFilter:
    """At most one criterion applies: completion, then category, then priority."""

    completed: bool | None = None
    category: str | None = None
    priority: str | None = None


@dataclass(slots=True, frozen=True)
class TaskSummary:

    total: int
    completed: int
    pending: int
    high_priority: int
    overdue: int

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool

from taskdesk.domain.tasks.entities import Task, TaskFilter, TaskSummary


class TaskCreateDTO(BaseModel):
    model_config = ConfigDict(validate_by_name=True, validate_by_alias=True)

    title: str = ""
    description: str | None = None
    category: str | None = None
    priority: str | None = None
    due_date: str | None = Field(None, alias="dueDate")

    def to_fields(self) -> dict[str, Any]:
        return self.model_dump(by_alias=False)


class TaskUpdateDTO(BaseModel):
    """Partial update; only keys present in the request body are applied."""

    model_config = ConfigDict(validate_by_name=True, validate_by_alias=True)

    title: str | None = None
    description: str | None = None
    completed: StrictBool | None = None
    category: str | None = None
    priority: str | None = None
    due_date: str | None = Field(None, alias="dueDate")

    def to_changes(self) -> dict[str, Any]:
        return self.model_dump(by_alias=False, exclude_unset=True)


class TaskQueryDTO(BaseModel):
    completed: str | None = None
    category: str | None = None
    priority: str | None = None

    def to_filter(self) -> TaskFilter:
        completed = {"true": True, "false": False}.get((self.completed or "").lower())
        return TaskFilter(
            completed=completed,
            category=self.category or None,
            priority=self.priority or None,
        )


class TaskDTO(BaseModel):
    id: str
    user_id: str = Field(serialization_alias="userId")
    title: str
    description: str
    completed: bool
    category: str
    priority: str
    due_date: str | None = Field(None, serialization_alias="dueDate")
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime = Field(serialization_alias="updatedAt")

    @classmethod
    def from_entity(cls, task: Task) -> TaskDTO:
        return cls(
            id=task.id,
            user_id=task.user_id,
            title=task.title,
            description=task.description,
            completed=task.completed,
            category=task.category,
            priority=task.priority,
            due_date=task.due_date,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class TaskSummaryDTO(BaseModel):
    total: int
    completed: int
    pending: int
    high_priority: int = Field(serialization_alias="highPriority")
    overdue: int

    @classmethod
    def from_summary(cls, summary: TaskSummary) -> TaskSummaryDTO:
        return cls(
            total=summary.total,
            completed=summary.completed,
            pending=summary.pending,
            high_priority=summary.high_priority,
            overdue=summary.overdue,
        )

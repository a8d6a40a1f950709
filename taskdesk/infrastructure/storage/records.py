# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Mapping between domain entities and the camelCase JSON records on disk."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from taskdesk.domain.tasks.entities import DEFAULT_CATEGORY, DEFAULT_PRIORITY, Task
from taskdesk.domain.users.entities import User


class MalformedRecordError(ValueError):
    pass


def format_timestamp(value: datetime) -> str:
    return value.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(value: Any) -> datetime:
    if not isinstance(value, str):
        raise MalformedRecordError(f"timestamp must be a string, got {type(value).__name__}")
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def _require_str(raw: dict[str, Any], key: str) -> str:
    value = raw.get(key)
    if not isinstance(value, str):
        raise MalformedRecordError(f"{key} must be a string")
    return value


def user_to_record(user: User) -> dict[str, Any]:
    return {
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "passwordHash": user.password_hash,
        "createdAt": format_timestamp(user.created_at),
    }


def user_from_record(raw: Any) -> User:
    if not isinstance(raw, dict):
        raise MalformedRecordError("user record must be an object")
    return User(
        id=str(raw.get("id") or ""),
        name=_require_str(raw, "name"),
        email=_require_str(raw, "email"),
        password_hash=str(raw.get("passwordHash") or ""),
        created_at=parse_timestamp(raw.get("createdAt")),
    )


def task_to_record(task: Task) -> dict[str, Any]:
    record: dict[str, Any] = {
        "id": task.id,
        "userId": task.user_id,
        "title": task.title,
        "description": task.description,
        "completed": task.completed,
        "category": task.category,
        "priority": task.priority,
        "createdAt": format_timestamp(task.created_at),
        "updatedAt": format_timestamp(task.updated_at),
    }
    if task.due_date is not None:
        record["dueDate"] = task.due_date
    return record


def task_from_record(raw: Any) -> Task:
    if not isinstance(raw, dict):
        raise MalformedRecordError("task record must be an object")
    due_date = raw.get("dueDate")
    completed = raw.get("completed", False)
    if not isinstance(completed, bool):
        raise MalformedRecordError("completed must be a boolean")
    return Task(
        id=str(raw.get("id") or ""),
        user_id=str(raw.get("userId") or ""),
        title=_require_str(raw, "title"),
        description=str(raw.get("description") or ""),
        completed=completed,
        category=str(raw.get("category") or DEFAULT_CATEGORY),
        priority=str(raw.get("priority") or DEFAULT_PRIORITY),
        due_date=str(due_date) if due_date else None,
        created_at=parse_timestamp(raw.get("createdAt")),
        updated_at=parse_timestamp(raw.get("updatedAt") or raw.get("createdAt")),
    )


def dump_document(users: list[User], tasks: list[Task]) -> dict[str, Any]:
    return {
        "users": [user_to_record(u) for u in users],
        "tasks": [task_to_record(t) for t in tasks],
    }


def load_document(raw: Any) -> tuple[list[User], list[Task]]:
    if not isinstance(raw, dict):
        raise MalformedRecordError("document root must be an object")
    users_raw = raw.get("users", [])
    tasks_raw = raw.get("tasks", [])
    if not isinstance(users_raw, list) or not isinstance(tasks_raw, list):
        raise MalformedRecordError("users and tasks must be arrays")
    users = [user_from_record(r) for r in users_raw]
    tasks = [task_from_record(r) for r in tasks_raw]
    if any(not u.id for u in users) or any(not t.id or not t.user_id for t in tasks):
        raise MalformedRecordError("record without id or owner")
    return users, tasks

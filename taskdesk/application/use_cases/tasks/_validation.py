# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Checks shared by the task use cases."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from taskdesk.domain.tasks.entities import MUTABLE_FIELDS, PRIORITIES
from taskdesk.domain.users.exceptions import AuthenticationRequiredError
from taskdesk.shared.errors.base import ValidationError


def require_owner(user_id: str | None) -> str:
    if not user_id:
        raise AuthenticationRequiredError()
    return user_id


def clean_title(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError.for_field("title", "missing")
    return value.strip()


def clean_priority(value: Any) -> str:
    if value not in PRIORITIES:
        raise ValidationError.for_field("priority", "invalid_choice")
    return value


def clean_category(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError.for_field("category", "missing")
    return value.strip()


def clean_changes(changes: Mapping[str, Any]) -> dict[str, Any]:
    """Validate a partial update; unknown keys are dropped."""
    cleaned: dict[str, Any] = {}
    for field in MUTABLE_FIELDS:
        if field not in changes:
            continue
        value = changes[field]
        if field == "title":
            cleaned[field] = clean_title(value)
        elif field == "priority":
            cleaned[field] = clean_priority(value)
        elif field == "category":
            cleaned[field] = clean_category(value)
        elif field == "completed":
            if not isinstance(value, bool):
                raise ValidationError.for_field("completed", "bool_type")
            cleaned[field] = value
        elif field == "description":
            cleaned[field] = "" if value is None else str(value)
        elif field == "due_date":
            cleaned[field] = str(value) if value else None
    return cleaned

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import (
    CATEGORIES,
    DEFAULT_CATEGORY,
    DEFAULT_PRIORITY,
    MUTABLE_FIELDS,
    PRIORITIES,
    NewTask,
    Task,
    TaskFilter,
    TaskSummary,
)
from .exceptions import TaskNotFoundError

__all__ = [
    "CATEGORIES",
    "DEFAULT_CATEGORY",
    "DEFAULT_PRIORITY",
    "MUTABLE_FIELDS",
    "PRIORITIES",
    "NewTask",
    "Task",
    "TaskFilter",
    "TaskNotFoundError",
    "TaskSummary",
]

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from taskdesk.shared.errors.base import NotFoundError


class TaskNotFoundError(NotFoundError):
    code = "task_not_found"

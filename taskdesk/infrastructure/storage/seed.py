# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Demo dataset served while no backing file exists."""

from __future__ import annotations

from datetime import datetime, timedelta

from taskdesk.domain.tasks.entities import Task
from taskdesk.domain.users.entities import User

DEMO_USER_ID = "1"
DEMO_EMAIL = "demo@example.com"


def build_seed(now: datetime, *, demo_password_hash: str = "") -> tuple[list[User], list[Task]]:
    """Return one demo user and two demo tasks.

    With an empty ``demo_password_hash`` the demo account exists but nobody can
    log into it, since verification of an empty digest always fails.
    """
    users = [
        User(
            id=DEMO_USER_ID,
            name="Demo User",
            email=DEMO_EMAIL,
            password_hash=demo_password_hash,
            created_at=now,
        )
    ]
    tasks = [
        Task(
            id="1",
            user_id=DEMO_USER_ID,
            title="Welcome to Task Manager",
            description="This is your first task. Try adding more!",
            completed=False,
            category="development",
            priority="medium",
            due_date=(now + timedelta(days=1)).isoformat(),
            created_at=now,
            updated_at=now,
        ),
        Task(
            id="2",
            user_id=DEMO_USER_ID,
            title="Complete Q1 Report",
            description="Prepare quarterly financial report",
            completed=True,
            category="finance",
            priority="high",
            due_date=(now + timedelta(days=2)).isoformat(),
            created_at=now,
            updated_at=now,
        ),
    ]
    return users, tasks

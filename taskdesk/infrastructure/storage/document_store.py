# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Embedded two-collection document store backed by a single JSON file."""

from __future__ import annotations

import json
import threading
import uuid
from collections.abc import Callable, Iterable, Mapping
from dataclasses import replace
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from taskdesk.domain.tasks.entities import MUTABLE_FIELDS, NewTask, Task
from taskdesk.domain.tasks.repositories import TaskRepository
from taskdesk.domain.users.entities import NewUser, User
from taskdesk.domain.users.exceptions import UserAlreadyExistsError
from taskdesk.domain.users.repositories import UserRepository
from taskdesk.shared.errors.base import OperationFailedError
from taskdesk.shared.logging import logger
from taskdesk.utils.fs import preserve_copy, write_json_atomic

from .records import dump_document, load_document
from .seed import build_seed


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _new_id() -> str:
    return uuid.uuid4().hex


class JsonDocumentStore(UserRepository, TaskRepository):
    """Users and tasks held in memory and rewritten to disk on every mutation.

    Every read accepts an optional ``owner_id``; when given, only tasks whose
    ``user_id`` equals it are visible, and a mismatch looks exactly like a
    missing record. Mutations run under one re-entrant lock together with the
    file write, so concurrent request threads never lose updates or tear the
    file. Collections are replaced, never edited in place, which makes rolling
    back a failed write a matter of restoring the previous lists.

    Each mutation serializes the whole document, so write cost grows with the
    total number of records.
    """

    def __init__(
        self,
        path: str | Path,
        *,
        clock: Callable[[], datetime] = _utcnow,
        id_factory: Callable[[], str] = _new_id,
        demo_password_hash: str = "",
    ) -> None:
        self._path = Path(path)
        self._clock = clock
        self._id_factory = id_factory
        self._demo_password_hash = demo_password_hash
        self._lock = threading.RLock()
        self._users: list[User] = []
        self._tasks: list[Task] = []
        self._loaded = False

    @property
    def path(self) -> Path:
        return self._path

    # ------------------------------------------------------------------ lifecycle

    def open(self) -> JsonDocumentStore:
        with self._lock:
            self._ensure_loaded()
        return self

    def close(self) -> None:
        with self._lock:
            if not self._loaded:
                return
            self._users = []
            self._tasks = []
            self._loaded = False
            logger.info(f"store: closed path={self._path}")

    def __enter__(self) -> JsonDocumentStore:
        return self.open()

    def __exit__(self, *_exc: object) -> None:
        self.close()

    def _ensure_loaded(self) -> None:
        if not self._loaded:
            self._users, self._tasks = self._load()
            self._loaded = True

    def _load(self) -> tuple[list[User], list[Task]]:
        if not self._path.exists():
            logger.info(f"store: no backing file at {self._path}, serving seed data")
            return self._seed()

        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
            users, tasks = load_document(raw)
        except (OSError, ValueError) as exc:
            logger.error(
                f"store: unreadable backing file {self._path} ({type(exc).__name__}: {exc}); "
                "falling back to seed data"
            )
            try:
                backup = preserve_copy(self._path, f".corrupt-{self._now():%Y%m%dT%H%M%S}")
            except OSError:
                logger.exception(f"store: could not preserve {self._path}")
            else:
                logger.warning(f"store: previous contents kept at {backup}")
            return self._seed()

        logger.info(f"store: loaded users={len(users)} tasks={len(tasks)} from {self._path}")
        return users, tasks

    def _now(self) -> datetime:
        # The file keeps millisecond timestamps; memory must match it exactly.
        now = self._clock()
        return now.replace(microsecond=now.microsecond // 1000 * 1000)

    def _seed(self) -> tuple[list[User], list[Task]]:
        return build_seed(self._now(), demo_password_hash=self._demo_password_hash)

    def _commit(self, operation: str, users: list[User], tasks: list[Task]) -> None:
        """Swap in new collections and write them out, restoring the old ones on failure."""
        previous = (self._users, self._tasks)
        self._users, self._tasks = users, tasks
        try:
            write_json_atomic(self._path, dump_document(users, tasks))
        except (OSError, TypeError, ValueError) as exc:
            self._users, self._tasks = previous
            logger.opt(exception=exc).error(
                f"store: {operation} rolled back, write to {self._path} failed"
            )
            raise OperationFailedError(operation) from exc

    def _next_id(self, taken: Iterable[str]) -> str:
        used = set(taken)
        candidate = self._id_factory()
        while candidate in used:
            candidate = self._id_factory()
        return candidate

    # ------------------------------------------------------------------ users

    def list_users(self) -> list[User]:
        with self._lock:
            self._ensure_loaded()
            return list(self._users)

    def find_user_by_email(self, email: str) -> User | None:
        with self._lock:
            self._ensure_loaded()
            return next((u for u in self._users if u.email == email), None)

    def find_user_by_id(self, user_id: str) -> User | None:
        with self._lock:
            self._ensure_loaded()
            return next((u for u in self._users if u.id == user_id), None)

    def create_user(self, fields: NewUser) -> User:
        with self._lock:
            self._ensure_loaded()
            if any(u.email == fields.email for u in self._users):
                raise UserAlreadyExistsError()
            user = User(
                id=self._next_id(u.id for u in self._users),
                name=fields.name,
                email=fields.email,
                password_hash=fields.password_hash,
                created_at=self._now(),
            )
            self._commit("create_user", [*self._users, user], self._tasks)
            logger.info(f"store: created user id={user.id} total={len(self._users)}")
            return user

    # ------------------------------------------------------------------ tasks

    def _select(self, owner_id: str | None, predicate: Callable[[Task], bool]) -> list[Task]:
        with self._lock:
            self._ensure_loaded()
            return [t for t in self._tasks if t.owned_by(owner_id) and predicate(t)]

    def list_tasks(self, owner_id: str | None = None) -> list[Task]:
        return self._select(owner_id, lambda _t: True)

    def find_task_by_id(self, task_id: str, owner_id: str | None = None) -> Task | None:
        matches = self._select(owner_id, lambda t: t.id == task_id)
        return matches[0] if matches else None

    def list_tasks_by_completion(self, completed: bool, owner_id: str | None = None) -> list[Task]:
        return self._select(owner_id, lambda t: t.completed is completed)

    def list_tasks_by_category(self, category: str, owner_id: str | None = None) -> list[Task]:
        return self._select(owner_id, lambda t: t.category == category)

    def list_tasks_by_priority(self, priority: str, owner_id: str | None = None) -> list[Task]:
        return self._select(owner_id, lambda t: t.priority == priority)

    def create_task(self, fields: NewTask, owner_id: str) -> Task:
        with self._lock:
            self._ensure_loaded()
            now = self._now()
            task = Task(
                id=self._next_id(t.id for t in self._tasks),
                user_id=owner_id,
                title=fields.title,
                description=fields.description,
                completed=fields.completed,
                category=fields.category,
                priority=fields.priority,
                due_date=fields.due_date,
                created_at=now,
                updated_at=now,
            )
            self._commit("create_task", self._users, [*self._tasks, task])
            logger.info(f"store: created task id={task.id} user={owner_id}")
            return task

    def update_task(
        self, task_id: str, changes: Mapping[str, Any], owner_id: str | None = None
    ) -> Task | None:
        with self._lock:
            self._ensure_loaded()
            index = next((i for i, t in enumerate(self._tasks) if t.id == task_id), None)
            if index is None or not self._tasks[index].owned_by(owner_id):
                return None

            current = self._tasks[index]
            merged = {k: v for k, v in changes.items() if k in MUTABLE_FIELDS}
            ignored = set(changes) - set(merged)
            if ignored:
                logger.debug(f"store: update_task ignoring fields {sorted(ignored)}")
            updated = replace(current, **merged, updated_at=max(self._now(), current.created_at))

            tasks = list(self._tasks)
            tasks[index] = updated
            self._commit("update_task", self._users, tasks)
            logger.info(f"store: updated task id={task_id} fields={sorted(merged)}")
            return updated

    def delete_task(self, task_id: str, owner_id: str | None = None) -> bool:
        with self._lock:
            self._ensure_loaded()
            target = next((t for t in self._tasks if t.id == task_id), None)
            if target is None or not target.owned_by(owner_id):
                return False
            self._commit("delete_task", self._users, [t for t in self._tasks if t.id != task_id])
            logger.info(f"store: deleted task id={task_id}")
            return True


__all__ = ["JsonDocumentStore"]

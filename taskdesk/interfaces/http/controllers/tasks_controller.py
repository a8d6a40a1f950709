# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from taskdesk.application.use_cases.tasks import (
    CreateTaskUseCase,
    DeleteTaskUseCase,
    GetTaskUseCase,
    ListTasksUseCase,
    SummarizeTasksUseCase,
    UpdateTaskUseCase,
)
from taskdesk.domain.tasks.exceptions import TaskNotFoundError
from taskdesk.interfaces.http.dto.tasks import (
    TaskCreateDTO,
    TaskDTO,
    TaskQueryDTO,
    TaskSummaryDTO,
    TaskUpdateDTO,
)
from taskdesk.interfaces.http.session import RequestSession
from taskdesk.shared.errors.validation import raise_validation_error


class TasksController:
    def __init__(
        self,
        *,
        session: RequestSession,
        list_use_case: ListTasksUseCase,
        get_use_case: GetTaskUseCase,
        create_use_case: CreateTaskUseCase,
        update_use_case: UpdateTaskUseCase,
        delete_use_case: DeleteTaskUseCase,
        summary_use_case: SummarizeTasksUseCase,
    ) -> None:
        self._session = session
        self._list = list_use_case
        self._get = get_use_case
        self._create = create_use_case
        self._update = update_use_case
        self._delete = delete_use_case
        self._summary = summary_use_case

    def list_tasks(self) -> tuple[Response, int]:
        user_id = self._session.require_user_id()
        try:
            query = TaskQueryDTO.model_validate(request.args.to_dict())
        except ValidationError as exc:
            raise_validation_error(exc)

        tasks = self._list.execute(user_id, query.to_filter())
        data = [TaskDTO.from_entity(t).to_payload() for t in tasks]
        return jsonify({"ok": True, "data": data}), 200

    def create_task(self) -> tuple[Response, int]:
        user_id = self._session.require_user_id()
        try:
            dto = TaskCreateDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        task = self._create.execute(user_id, dto.to_fields())
        return jsonify({"ok": True, "data": TaskDTO.from_entity(task).to_payload()}), 201

    def summary(self) -> tuple[Response, int]:
        summary = self._summary.execute(self._session.user_id())
        data = TaskSummaryDTO.from_summary(summary).model_dump(by_alias=True)
        return jsonify({"ok": True, "data": data}), 200

    def get_task(self, task_id: str) -> tuple[Response, int]:
        task = self._get.execute(self._session.user_id(), task_id)
        return jsonify({"ok": True, "data": TaskDTO.from_entity(task).to_payload()}), 200

    def update_task(self, task_id: str) -> tuple[Response, int]:
        user_id = self._session.require_user_id()
        try:
            dto = TaskUpdateDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        task = self._update.execute(user_id, task_id, dto.to_changes())
        return jsonify({"ok": True, "data": TaskDTO.from_entity(task).to_payload()}), 200

    def delete_task(self, task_id: str) -> tuple[Response, int]:
        if not self._delete.execute(self._session.user_id(), task_id):
            raise TaskNotFoundError()
        return jsonify({"ok": True, "data": {"id": task_id}}), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("tasks", __name__, url_prefix="/api/tasks")
        bp.add_url_rule("", view_func=self.list_tasks, methods=["GET"], endpoint="tasks_list")
        bp.add_url_rule("", view_func=self.create_task, methods=["POST"], endpoint="tasks_create")
        bp.add_url_rule("/summary", view_func=self.summary, methods=["GET"])
        bp.add_url_rule(
            "/<task_id>", view_func=self.get_task, methods=["GET"], endpoint="tasks_get"
        )
        bp.add_url_rule(
            "/<task_id>", view_func=self.update_task, methods=["PUT", "PATCH"], endpoint="tasks_update"
        )
        bp.add_url_rule(
            "/<task_id>", view_func=self.delete_task, methods=["DELETE"], endpoint="tasks_delete"
        )
        return bp

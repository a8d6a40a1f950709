# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from http import HTTPStatus
from typing import Any, ClassVar


class AppError(Exception):
    """Base of every failure that maps onto an HTTP response.

    Subclasses pin ``code`` and ``status`` as class attributes; an instance may
    override either one. ``context`` is echoed to the client, so it must never
    carry secrets.
    """

    code: ClassVar[str] = "internal_error"
    status: ClassVar[HTTPStatus] = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(
        self,
        *,
        code: str | None = None,
        status: HTTPStatus | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        if code is not None:
            self.code = code  # type: ignore[misc]
        if status is not None:
            self.status = status  # type: ignore[misc]
        self.context = context
        super().__init__(self.code)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.code}
        if self.context:
            payload["context"] = dict(self.context)
        return payload


class DomainError(AppError):
    code = "domain_error"
    status = HTTPStatus.BAD_REQUEST


class InfrastructureError(AppError):
    code = "infrastructure_error"


def field_errors(*entries: tuple[str, str, Mapping[str, Any] | None]) -> dict[str, Any]:
    """Build the ``{"fields": [...], "errors": [...]}`` validation context."""
    errors: list[dict[str, Any]] = []
    for field, kind, ctx in entries:
        entry: dict[str, Any] = {"field": field, "type": kind}
        if ctx:
            entry["ctx"] = dict(ctx)
        errors.append(entry)
    fields = sorted({field for field, _, _ in entries})
    return {"fields": fields, "errors": errors}


class ValidationError(AppError):
    code = "validation_error"
    status = HTTPStatus.UNPROCESSABLE_ENTITY

    def __init__(self, *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(context=context)

    @classmethod
    def for_field(
        cls, field: str, reason: str, ctx: Mapping[str, Any] | None = None
    ) -> ValidationError:
        return cls(context=field_errors((field, reason, ctx)))


class ConflictError(DomainError):
    code = "conflict"
    status = HTTPStatus.CONFLICT


class AuthenticationError(DomainError):
    code = "unauthorized"
    status = HTTPStatus.UNAUTHORIZED


class NotFoundError(DomainError):
    code = "not_found"
    status = HTTPStatus.NOT_FOUND


class OperationFailedError(InfrastructureError):
    """Hashing or persistence malfunction; callers only ever see the code."""

    code = "operation_failed"

    def __init__(self, operation: str | None = None) -> None:
        super().__init__()
        self.operation = operation

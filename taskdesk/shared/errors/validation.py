# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any, NoReturn

from pydantic import ValidationError as PydanticValidationError

from .base import ValidationError, field_errors


def _json_safe(value: Any) -> Any:
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    return str(value)


def format_pydantic_errors(exc: PydanticValidationError) -> dict[str, Any]:
    """Flatten pydantic's error list into the API's validation context."""
    entries = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error.get("loc", ()) if part is not None)
        ctx = {k: _json_safe(v) for k, v in (error.get("ctx") or {}).items()}
        entries.append((field or "body", error.get("type", "value_error"), ctx or None))
    return field_errors(*entries)


def raise_validation_error(exc: PydanticValidationError) -> NoReturn:
    raise ValidationError(context=format_pydantic_errors(exc)) from exc


__all__ = [
    "format_pydantic_errors",
    "raise_validation_error",
]

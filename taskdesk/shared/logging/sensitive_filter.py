# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Redaction applied to every log record before it reaches a sink."""

from __future__ import annotations

import re
from typing import Any

_MASK = "***REDACTED***"

_RULES: list[tuple[re.Pattern[str], str]] = [
    # SECRET_KEY=..., secret-key: ...
    (re.compile(r"(secret[_-]?key\s*[:=]\s*['\"]?)[\w\-]{8,}", re.IGNORECASE), rf"\1{_MASK}"),
    # Signed session tokens, from cookies, headers or key=value dumps
    (re.compile(r"((?:auth[_-]?)?token\s*[:=]\s*['\"]?)[\w\-.]{20,}", re.IGNORECASE), rf"\1{_MASK}"),
    (re.compile(r"(bearer\s+)[\w\-.]{20,}", re.IGNORECASE), rf"\1{_MASK}"),
    (re.compile(r"(authorization\s*:\s*['\"]?)[^'\"]{10,}", re.IGNORECASE), rf"\1{_MASK}"),
    # Plain passwords and stored digests
    (re.compile(r"(password[_-]?hash\s*[:=]\s*['\"]?)[^'\"\s,]+", re.IGNORECASE), rf"\1{_MASK}"),
    (re.compile(r"(password\s*[:=]\s*['\"]?)[^'\"\s,]{6,}", re.IGNORECASE), rf"\1{_MASK}"),
    (re.compile(r"((?:scrypt|pbkdf2)[^$\s]*\$)[^\s'\"]+"), rf"\1{_MASK}"),
    # Email local parts; the domain stays for debugging
    (re.compile(r"[\w.%+-]+@([\w-]+(?:\.[\w-]+)*\.[a-zA-Z]{2,})"), r"***@\1"),
]


def sanitize_message(message: str) -> str:
    for pattern, replacement in _RULES:
        message = pattern.sub(replacement, message)
    return message


def sanitize_record(record: dict[str, Any]) -> bool:
    if "message" in record:
        record["message"] = sanitize_message(record["message"])
    return True

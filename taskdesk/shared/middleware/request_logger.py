# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""One start and one end line per request, tagged with a correlation id."""

from __future__ import annotations

import secrets
import time

from flask import Flask, Response, g, request

from taskdesk.shared.logging import (
    clear_log_context,
    get_correlation_id,
    logger,
    set_correlation_id,
)

REQUEST_ID_HEADER = "X-Request-ID"
_MAX_REQUEST_ID = 64


def _client_ip() -> str:
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.remote_addr or "unknown"


def _incoming_request_id() -> str:
    supplied = (request.headers.get(REQUEST_ID_HEADER) or "").strip()
    if supplied and len(supplied) <= _MAX_REQUEST_ID and supplied.isprintable():
        return supplied
    return secrets.token_hex(6)


def configure_request_logging(app: Flask, *, debug_mode: bool = False) -> None:
    @app.before_request
    def _start() -> None:
        set_correlation_id(_incoming_request_id())
        g.request_started = time.perf_counter()
        if debug_mode:
            # Query values are logged; cookies and bodies never are.
            logger.debug(
                f"http: --> {request.method} {request.full_path.rstrip('?')} "
                f"from {_client_ip()} body_size={request.content_length or 0} "
                f"session_cookie={'yes' if request.cookies else 'no'}"
            )
        else:
            logger.info(f"http: --> {request.method} {request.path}")

    @app.after_request
    def _finish(response: Response) -> Response:
        started = g.get("request_started", time.perf_counter())
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            f"http: <-- {request.method} {request.path} status={response.status_code} "
            f"duration={elapsed_ms:.1f}ms user={g.get('user_id') or '-'}"
        )
        response.headers.setdefault(REQUEST_ID_HEADER, get_correlation_id())
        return response

    @app.teardown_request
    def _teardown(exc: BaseException | None) -> None:
        if exc is not None:
            logger.error(f"http: {type(exc).__name__} escaped {request.method} {request.path}")
        clear_log_context()


__all__ = ["REQUEST_ID_HEADER", "configure_request_logging"]

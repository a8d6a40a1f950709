# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Flask, Response, g, jsonify, request
from werkzeug.exceptions import HTTPException

from taskdesk.shared.logging import logger

from .base import AppError


def handle_app_error(error: AppError) -> tuple[Response, HTTPStatus]:
    return jsonify(error.to_dict()), error.status


def _where() -> str:
    return f"{request.method} {request.path} user={getattr(g, 'user_id', None) or '-'}"


def register_error_handler(
    app: Flask,
    *,
    debug_mode: bool = False,
    default_status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR,
) -> None:
    """Render every failure as ``{"error": code}`` JSON.

    Client errors are logged as warnings without a traceback. Server errors
    keep the chained cause in the log but never in the response body.
    """

    @app.errorhandler(AppError)
    def _on_app_error(exc: AppError):
        if exc.status >= HTTPStatus.INTERNAL_SERVER_ERROR:
            operation = getattr(exc, "operation", None)
            logger.opt(exception=exc).error(
                f"error: {exc.code} operation={operation or '-'} on {_where()}"
            )
        else:
            logger.warning(f"error: {exc.code} ({int(exc.status)}) on {_where()}")
        return handle_app_error(exc)

    @app.errorhandler(HTTPException)
    def _on_http_error(exc: HTTPException):
        code = (exc.name or "http_error").lower().replace(" ", "_")
        return jsonify({"error": code}), exc.code or default_status

    @app.errorhandler(Exception)
    def _on_unexpected(exc: Exception):
        if debug_mode:
            logger.opt(exception=exc).error(f"error: unhandled {type(exc).__name__} on {_where()}")
        else:
            logger.error(f"error: unhandled {type(exc).__name__} on {_where()}")
        return jsonify({"error": "internal_error"}), default_status

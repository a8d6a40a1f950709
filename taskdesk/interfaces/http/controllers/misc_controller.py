# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify

from taskdesk.infrastructure.storage import JsonDocumentStore


class MiscController:
    def __init__(self, *, store: JsonDocumentStore) -> None:
        self._store = store

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/api/health", view_func=self.health, methods=["GET"])
        return bp

    def health(self):
        return jsonify({"ok": True, "storage": str(self._store.path.name)})

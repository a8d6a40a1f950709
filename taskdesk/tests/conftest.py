from __future__ import annotations

from collections.abc import Iterator
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

from taskdesk.app import create_app
from taskdesk.container import Container
from taskdesk.domain.users.repositories import PasswordHasher
from taskdesk.infrastructure.storage import JsonDocumentStore
from taskdesk.shared.config import AppConfig


class FakeClock:
    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2026, 1, 1, 9, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


class DeterministicHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return bool(hashed) and hashed == f"hashed:{password}"


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "data" / "db.json"


@pytest.fixture()
def store(db_path: Path, clock: FakeClock) -> Iterator[JsonDocumentStore]:
    with JsonDocumentStore(db_path, clock=clock) as opened:
        yield opened


@pytest.fixture()
def app_config(db_path: Path) -> AppConfig:
    return AppConfig(  # type: ignore[call-arg]
        _env_file=None,
        app_env="development",
        secret_key="test-secret-key",
        data_file=db_path,
        log_level="WARNING",
    )


@pytest.fixture()
def container(app_config: AppConfig) -> Container:
    return Container(app_config)


@pytest.fixture()
def app(app_config: AppConfig, container: Container) -> Flask:
    flask_app = create_app(app_config, container)
    flask_app.config.update(TESTING=True)
    return flask_app


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    return app.test_client()

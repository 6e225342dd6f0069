from __future__ import annotations

from collections.abc import Iterator

import pytest
from flask import Flask
from flask.testing import FlaskClient

from skyboard.app import create_app
from skyboard.config import AppConfig, ServerConfig, StoreConfig
from skyboard.store import StateStore


class FakeClock:
    """Monotonic clock the tests move by hand."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(clock: FakeClock) -> StateStore:
    return StateStore(clock=clock)


@pytest.fixture
def app_config() -> AppConfig:
    return AppConfig(
        server=ServerConfig(host="127.0.0.1", port=3030),
        store=StoreConfig(),
        debug=False,
    )


@pytest.fixture
def app(app_config: AppConfig, store: StateStore) -> Iterator[Flask]:
    app = create_app(app_config=app_config, store=store)
    app.config["TESTING"] = True
    yield app


@pytest.fixture
def api_client(app: Flask) -> FlaskClient:
    return app.test_client()

"""Shared fixtures.

Representative upstream payloads live in ``tests/fixtures``, shaped like the
live APIs' responses, and are replayed through ``responses``; nothing here
touches the network.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
import responses

from hipsterstack import create_app
from hipsterstack.clients.http_client import HttpClient
from hipsterstack.config.settings import Settings

FIXTURES_DIR = Path(__file__).parent / "fixtures"

HIPSTER_BASE_URL = "http://hipsterjesus.com"
STACK_EXCHANGE_BASE_URL = "https://api.stackexchange.com/2.3"


def load_fixture(name: str) -> Any:
    """Read a recorded JSON payload from tests/fixtures."""
    return json.loads((FIXTURES_DIR / name).read_text(encoding="utf-8"))


def make_settings(**overrides: Any) -> Settings:
    values = dict(
        app_name="hipsterstack-test",
        log_level="DEBUG",
        request_timeout_seconds=5,
        hipster_base_url=HIPSTER_BASE_URL,
        hipster_source="remote",
        stack_exchange_base_url=STACK_EXCHANGE_BASE_URL,
        default_site="stackoverflow",
    )
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def hipster_http() -> HttpClient:
    return HttpClient(base_url=HIPSTER_BASE_URL, timeout_seconds=5)


@pytest.fixture
def stack_exchange_http() -> HttpClient:
    return HttpClient(base_url=STACK_EXCHANGE_BASE_URL, timeout_seconds=5)


@pytest.fixture
def mocked_responses():
    """Activate ``responses``; unregistered URLs raise ConnectionError."""
    with responses.RequestsMock() as rsps:
        yield rsps


@pytest.fixture
def app(settings: Settings):
    flask_app = create_app(settings)
    flask_app.config["TESTING"] = True
    return flask_app


@pytest.fixture
def client(app):
    return app.test_client()

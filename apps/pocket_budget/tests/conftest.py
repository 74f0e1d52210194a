from __future__ import annotations

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from pocket_budget.api.app import create_app
from pocket_budget.core.settings import get_settings

SETTINGS_ENV_VARS = (
    "MONEY_LOCALE",
    "MONEY_CURRENCY",
    "MONEY_DECIMAL_SEPARATOR",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def us_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MONEY_LOCALE", "en-US")
    monkeypatch.setenv("MONEY_CURRENCY", "USD")
    get_settings.cache_clear()


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    with TestClient(create_app()) as test_client:
        yield test_client

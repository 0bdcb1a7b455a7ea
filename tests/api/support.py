# This file provides shared helpers for API endpoint tests.
# It exists so tests can override the employee repository without touching real databases.
# The helpers build consistent config objects and scoped TestClient contexts.
# Centralized test wiring keeps API tests small and focused on behavior.

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from fastapi.testclient import TestClient

from src.api.api_config import ApiConfig
from src.api.app import app
from src.api.dependencies import get_config, get_database_client, get_employee_repository


def build_test_config(*, employee_store: str = "memory") -> ApiConfig:
    """Create deterministic API config for tests."""

    return ApiConfig(
        api_name="Test Employee API",
        host="0.0.0.0",
        port=8000,
        environment="test",
        database_url="sqlite://",
        employee_store=employee_store,
        seed_on_startup=False,
        default_records_per_page=100,
        max_records_per_page=100,
        audit_actor="tester",
        allowed_origins=[],
        app_version="0.1.0",
    )


class FakeDBClient:
    """Simple fake DB dependency for health/readiness endpoint tests."""

    def __init__(self, *, connected: bool = True, existing_tables: set[str] | None = None) -> None:
        self._connected = connected
        self._tables = existing_tables if existing_tables is not None else {"employees"}

    def can_connect(self) -> bool:
        return self._connected

    def table_exists(self, table_name: str) -> bool:
        return self._connected and table_name in self._tables


@contextmanager
def api_test_client(
    *,
    config: ApiConfig | None = None,
    db_client: Any | None = None,
    employee_repository: Any | None = None,
) -> Iterator[TestClient]:
    """Yield a TestClient with scoped dependency overrides."""

    resolved_config = config or build_test_config()

    app.dependency_overrides[get_config] = lambda: resolved_config
    if db_client is not None:
        app.dependency_overrides[get_database_client] = lambda: db_client
    if employee_repository is not None:
        app.dependency_overrides[get_employee_repository] = lambda: employee_repository

    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()

# This file provides shared builders for employee domain tests.
# It exists so repository, validation, and seed tests use the same clock and store wiring.

from __future__ import annotations

from datetime import UTC, datetime

from src.api.db_access import DatabaseClient
from src.common.clock import FixedClock
from src.employees.audit import AuditStamper

FIXED_NOW = datetime(2026, 1, 15, 9, 30, tzinfo=UTC)


def build_stamper(*, clock: FixedClock | None = None, actor: str = "tester") -> AuditStamper:
    return AuditStamper(clock=clock or FixedClock(FIXED_NOW), actor=actor)


def build_sqlite_client() -> DatabaseClient:
    """In-memory SQLite database with the employee schema created."""

    client = DatabaseClient(database_url="sqlite://")
    client.create_schema()
    return client

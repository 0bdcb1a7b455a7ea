# This file tests API health, readiness, and version endpoints.
# It exists to validate operational contracts used by orchestration and monitoring.
# The tests confirm request IDs and version metadata are always returned.

from __future__ import annotations

from src.api.app import app
from src.employees.repository import InMemoryEmployeeRepository
from tests.api.support import FakeDBClient, api_test_client, build_test_config
from tests.employees.support import build_stamper


def test_health_endpoint_returns_expected_fields() -> None:
    config = build_test_config()
    with api_test_client(config=config, db_client=FakeDBClient()) as client:
        response = client.get("/health")

    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "ok"
    assert payload["environment"] == "test"
    assert payload["service_name"] == config.api_name
    assert payload["request_id"]
    assert response.headers["x-request-id"] == payload["request_id"]
    assert "timestamp" in payload


def test_ready_endpoint_reflects_sql_store_status() -> None:
    config = build_test_config(employee_store="sql")
    with api_test_client(config=config, db_client=FakeDBClient(connected=True)) as client:
        ready = client.get("/ready")
    with api_test_client(config=config, db_client=FakeDBClient(existing_tables=set())) as client:
        missing_table = client.get("/ready")
    with api_test_client(config=config, db_client=FakeDBClient(connected=False)) as client:
        offline = client.get("/ready")

    assert ready.json()["ready"] is True
    assert ready.json()["employees_table_ready"] is True
    assert missing_table.json()["db_connected"] is True
    assert missing_table.json()["ready"] is False
    assert offline.json()["database"] == "unreachable"
    assert offline.json()["ready"] is False


def test_ready_endpoint_memory_store_is_always_ready() -> None:
    with api_test_client(config=build_test_config(), db_client=FakeDBClient(connected=False)) as client:
        response = client.get("/ready")

    payload = response.json()
    assert payload["employee_store"] == "memory"
    assert payload["ready"] is True
    assert payload["database"] == "not_used"


def test_version_endpoint_returns_version_metadata() -> None:
    config = build_test_config()
    with api_test_client(config=config, db_client=FakeDBClient()) as client:
        response = client.get("/version")

    assert response.status_code == 200
    payload = response.json()
    assert payload["app_version"] == config.app_version
    assert payload["project"] == config.api_name
    assert payload["version"] == config.app_version


def test_request_id_header_is_echoed() -> None:
    with api_test_client(db_client=FakeDBClient()) as client:
        response = client.get("/health", headers={"x-request-id": "req-123"})

    assert response.json()["request_id"] == "req-123"
    assert response.headers["x-request-id"] == "req-123"


def test_ready_endpoint_reports_failed_bootstrap() -> None:
    config = build_test_config(employee_store="sql")
    with api_test_client(config=config, db_client=FakeDBClient(connected=True)) as client:
        app.state.db_bootstrap_failed = True
        try:
            response = client.get("/ready")
        finally:
            app.state.db_bootstrap_failed = False

    payload = response.json()
    assert payload["db_connected"] is True
    assert payload["bootstrap_failed"] is True
    assert payload["ready"] is False


def test_metrics_label_requests_by_route_template() -> None:
    repository = InMemoryEmployeeRepository(stamper=build_stamper())
    with api_test_client(db_client=FakeDBClient(), employee_repository=repository) as client:
        client.get("/employees/101")
        client.get("/employees/202")
        metrics = client.get("/metrics")

    assert metrics.status_code == 200
    assert 'path="/employees/{employee_id}"' in metrics.text
    assert 'path="/employees/101"' not in metrics.text
    assert 'path="/employees/202"' not in metrics.text

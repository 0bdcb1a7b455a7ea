# This file tests the /employees endpoints against the SQLAlchemy repository on in-memory SQLite.
# It exists to check seeded benefit projections and database-assigned ids end to end.

from __future__ import annotations

from src.employees.repository import SqlAlchemyEmployeeRepository
from tests.api.support import api_test_client, build_test_config
from tests.employees.support import build_sqlite_client, build_stamper


def _seeded_repository() -> SqlAlchemyEmployeeRepository:
    client = build_sqlite_client()
    stamper = build_stamper()
    client.seed(stamper=stamper)
    return SqlAlchemyEmployeeRepository(session=client.session(), stamper=stamper)


def test_seeded_employee_includes_benefit_costs() -> None:
    repository = _seeded_repository()
    with api_test_client(
        config=build_test_config(employee_store="sql"), employee_repository=repository
    ) as client:
        response = client.get("/employees/1")

    assert response.status_code == 200
    body = response.json()
    assert body["firstName"] == "John"
    assert "socialSecurityNumber" not in body
    benefits = {row["benefitName"]: row for row in body["benefits"]}
    assert set(benefits) == {"Health", "Dental"}
    assert benefits["Health"]["cost"] == 100.0
    assert benefits["Dental"]["cost"] == 50.0
    assert benefits["Health"]["employeeId"] == 1


def test_sql_backend_create_update_delete_round() -> None:
    repository = _seeded_repository()
    with api_test_client(
        config=build_test_config(employee_store="sql"), employee_repository=repository
    ) as client:
        created = client.post("/employees", json={"firstName": "Grace", "lastName": "Hopper"})
        new_id = created.json()["id"]
        blanked = client.put("/employees/1", json={"address1": ""})
        updated = client.put(f"/employees/{new_id}", json={"city": "Arlington"})
        filtered = client.get("/employees", params={"lastNameContains": "HOP"})
        deleted = client.delete("/employees/2")
        listing = client.get("/employees")

    assert created.status_code == 201
    assert new_id == 3
    assert blanked.status_code == 400
    assert updated.status_code == 200
    assert updated.json()["city"] == "Arlington"
    assert [row["id"] for row in filtered.json()] == [3]
    assert deleted.status_code == 204
    assert [row["id"] for row in listing.json()] == [1, 3]

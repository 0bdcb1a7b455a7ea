"""
Repository contract for employee storage and its two implementations.

`InMemoryEmployeeRepository` keeps entities in a list and scans it linearly; it is meant to
be owned as a single process-wide instance or created per test. It does no locking, so it is
only safe with one writer at a time.

`SqlAlchemyEmployeeRepository` works against one ORM session (one per request) and commits
each mutation as its own transaction. Concurrency control is left to the database.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol, TypeVar

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from src.employees.audit import AuditStamper
from src.employees.models import Employee, EmployeeBenefit

LOGGER = logging.getLogger("employees.repository")

T = TypeVar("T")

# Fields that `update` may change after creation. Names and SSN are immutable.
MUTABLE_EMPLOYEE_FIELDS: tuple[str, ...] = (
    "address1",
    "address2",
    "city",
    "state",
    "zip_code",
    "phone_number",
    "email",
)


class EntityNotFoundError(LookupError):
    """Raised when update/delete targets an id that is not in the store."""

    def __init__(self, entity_name: str, entity_id: int | None) -> None:
        self.entity_name = entity_name
        self.entity_id = entity_id
        super().__init__(f"{entity_name} with id {entity_id!r} was not found")


class ReadOnlyRepository(Protocol[T]):
    def get_by_id(self, entity_id: int) -> T | None: ...

    def get_all(self) -> list[T]: ...


class Repository(ReadOnlyRepository[T], Protocol[T]):
    def create(self, entity: T) -> None: ...

    def update(self, entity: T) -> None: ...

    def delete(self, entity: T) -> None: ...


@dataclass(frozen=True)
class EmployeeListCriteria:
    page: int = 1
    records_per_page: int = 100
    first_name_contains: str | None = None
    last_name_contains: str | None = None

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.records_per_page


class EmployeeRepository(Repository[Employee], Protocol):
    def list_page(self, criteria: EmployeeListCriteria) -> list[Employee]: ...


def _require_entity(entity: Employee | None) -> Employee:
    if entity is None:
        raise ValueError("entity must not be None")
    return entity


def _copy_mutable_fields(source: Employee, target: Employee) -> None:
    for field_name in MUTABLE_EMPLOYEE_FIELDS:
        setattr(target, field_name, getattr(source, field_name))


def _contains(value: str, needle: str | None) -> bool:
    if not needle or not needle.strip():
        return True
    return needle.lower() in (value or "").lower()


class InMemoryEmployeeRepository:
    """List-backed repository; ids are max existing id + 1."""

    def __init__(self, *, stamper: AuditStamper, employees: Sequence[Employee] = ()) -> None:
        self._stamper = stamper
        self._employees: list[Employee] = list(employees)

    def get_by_id(self, entity_id: int) -> Employee | None:
        for employee in self._employees:
            if employee.id == entity_id:
                return employee
        return None

    def get_all(self) -> list[Employee]:
        return list(self._employees)

    def list_page(self, criteria: EmployeeListCriteria) -> list[Employee]:
        matches = [
            employee
            for employee in self._employees
            if _contains(employee.first_name, criteria.first_name_contains)
            and _contains(employee.last_name, criteria.last_name_contains)
        ]
        return matches[criteria.offset : criteria.offset + criteria.records_per_page]

    def create(self, entity: Employee) -> None:
        employee = _require_entity(entity)
        employee.id = max((existing.id for existing in self._employees), default=0) + 1
        self._stamper.stamp_created(employee)
        self._employees.append(employee)

    def update(self, entity: Employee) -> None:
        employee = _require_entity(entity)
        existing = self.get_by_id(employee.id)
        if existing is None:
            raise EntityNotFoundError("Employee", employee.id)
        _copy_mutable_fields(employee, existing)
        self._stamper.stamp_modified(existing)

    def delete(self, entity: Employee) -> None:
        employee = _require_entity(entity)
        for index, existing in enumerate(self._employees):
            if existing.id == employee.id:
                del self._employees[index]
                return
        raise EntityNotFoundError("Employee", employee.id)


class SqlAlchemyEmployeeRepository:
    """Session-backed repository; ids come from the table's autoincrement column."""

    def __init__(self, *, session: Session, stamper: AuditStamper) -> None:
        self._session = session
        self._stamper = stamper

    def _base_query(self):
        return (
            select(Employee)
            .options(selectinload(Employee.benefits).selectinload(EmployeeBenefit.benefit))
            .order_by(Employee.id)
        )

    def get_by_id(self, entity_id: int) -> Employee | None:
        return self._session.get(Employee, entity_id)

    def get_all(self) -> list[Employee]:
        return list(self._session.scalars(self._base_query()).all())

    def list_page(self, criteria: EmployeeListCriteria) -> list[Employee]:
        query = self._base_query()
        if criteria.first_name_contains and criteria.first_name_contains.strip():
            query = query.where(
                Employee.first_name.icontains(criteria.first_name_contains, autoescape=True)
            )
        if criteria.last_name_contains and criteria.last_name_contains.strip():
            query = query.where(
                Employee.last_name.icontains(criteria.last_name_contains, autoescape=True)
            )
        query = query.offset(criteria.offset).limit(criteria.records_per_page)
        return list(self._session.scalars(query).all())

    def create(self, entity: Employee) -> None:
        employee = _require_entity(entity)
        self._stamper.stamp_created(employee)
        self._session.add(employee)
        self._commit()

    def update(self, entity: Employee) -> None:
        employee = _require_entity(entity)
        existing = self._session.get(Employee, employee.id)
        if existing is None:
            raise EntityNotFoundError("Employee", employee.id)
        _copy_mutable_fields(employee, existing)
        self._stamper.stamp_modified(existing)
        self._commit()

    def delete(self, entity: Employee) -> None:
        employee = _require_entity(entity)
        existing = self._session.get(Employee, employee.id)
        if existing is None:
            raise EntityNotFoundError("Employee", employee.id)
        self._session.delete(existing)
        self._commit()

    def _commit(self) -> None:
        try:
            self._session.commit()
        except Exception:
            LOGGER.debug("Rolling back employee transaction after failed commit.")
            self._session.rollback()
            raise

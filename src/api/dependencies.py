# This file provides dependency factories for FastAPI routes and middleware.
# It exists so the storage backend is chosen once, at composition time, and injected into routes.
# The in-memory repository is a process-wide singleton; SQL repositories get one session per request.
# Request validators also run here so handler bodies only ever see valid input.

from __future__ import annotations

from collections.abc import Iterator
from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Query

from src.api.api_config import ApiConfig, get_api_config
from src.api.db_access import DatabaseClient
from src.api.services.employee_service import EmployeeService
from src.common.clock import Clock, SystemClock
from src.employees.audit import AuditStamper
from src.employees.repository import (
    EmployeeRepository,
    InMemoryEmployeeRepository,
    SqlAlchemyEmployeeRepository,
)
from src.employees.schemas import (
    CreateEmployeeRequest,
    GetAllEmployeesRequest,
    UpdateEmployeeRequest,
)
from src.employees.validation import (
    CreateEmployeeRequestValidator,
    GetAllEmployeesRequestValidator,
    UpdateEmployeeRequestValidator,
    ensure_valid,
)


@lru_cache(maxsize=1)
def get_database_client() -> DatabaseClient:
    config = get_api_config()
    return DatabaseClient(database_url=config.database_url)


@lru_cache(maxsize=1)
def get_clock() -> Clock:
    return SystemClock()


def get_config() -> ApiConfig:
    return get_api_config()


ConfigDep = Annotated[ApiConfig, Depends(get_config)]


def get_audit_stamper(config: ConfigDep) -> AuditStamper:
    return AuditStamper(clock=get_clock(), actor=config.audit_actor)


@lru_cache(maxsize=1)
def get_in_memory_employee_repository() -> InMemoryEmployeeRepository:
    config = get_api_config()
    return InMemoryEmployeeRepository(
        stamper=AuditStamper(clock=get_clock(), actor=config.audit_actor)
    )


def get_employee_repository(
    config: ConfigDep,
    stamper: Annotated[AuditStamper, Depends(get_audit_stamper)],
) -> Iterator[EmployeeRepository]:
    if config.employee_store == "memory":
        yield get_in_memory_employee_repository()
        return

    session = get_database_client().session()
    try:
        yield SqlAlchemyEmployeeRepository(session=session, stamper=stamper)
    finally:
        session.close()


RepositoryDep = Annotated[EmployeeRepository, Depends(get_employee_repository)]


def get_employee_service(repository: RepositoryDep) -> EmployeeService:
    return EmployeeService(repository=repository)


def validated_list_request(
    config: ConfigDep,
    page: int | None = Query(default=None),
    records_per_page: int | None = Query(default=None, alias="recordsPerPage"),
    first_name_contains: str | None = Query(default=None, alias="firstNameContains"),
    last_name_contains: str | None = Query(default=None, alias="lastNameContains"),
) -> GetAllEmployeesRequest:
    request = GetAllEmployeesRequest(
        page=page,
        records_per_page=records_per_page,
        first_name_contains=first_name_contains,
        last_name_contains=last_name_contains,
    )
    validator = GetAllEmployeesRequestValidator(max_records_per_page=config.max_records_per_page)
    ensure_valid(validator.validate(request))
    return request


def validated_create_request(body: CreateEmployeeRequest) -> CreateEmployeeRequest:
    ensure_valid(CreateEmployeeRequestValidator().validate(body))
    return body


def validated_update_request(
    employee_id: int,
    body: UpdateEmployeeRequest,
    repository: RepositoryDep,
) -> UpdateEmployeeRequest:
    ensure_valid(UpdateEmployeeRequestValidator(repository).validate(employee_id, body))
    return body

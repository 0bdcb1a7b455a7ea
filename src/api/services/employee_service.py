# This file implements the employee operations behind the /employees endpoints.
# It exists so routers translate HTTP concerns only, while repository calls and DTO mapping live here.
# Lookups return None for unknown ids; the router decides the status code.

from __future__ import annotations

import logging

from src.employees.mapping import (
    employee_from_create_request,
    employee_from_update_request,
    employee_to_response,
)
from src.employees.repository import EmployeeListCriteria, EmployeeRepository
from src.employees.schemas import (
    CreateEmployeeRequest,
    EmployeeResponse,
    GetAllEmployeesRequest,
    UpdateEmployeeRequest,
)

LOGGER = logging.getLogger("api.employees")


class EmployeeService:
    """Employee CRUD on top of an injected repository."""

    def __init__(self, *, repository: EmployeeRepository) -> None:
        self.repository = repository

    def list_employees(
        self, request: GetAllEmployeesRequest, *, default_records_per_page: int
    ) -> list[EmployeeResponse]:
        criteria = EmployeeListCriteria(
            page=request.page or 1,
            records_per_page=request.records_per_page or default_records_per_page,
            first_name_contains=request.first_name_contains,
            last_name_contains=request.last_name_contains,
        )
        return [employee_to_response(employee) for employee in self.repository.list_page(criteria)]

    def get_employee(self, employee_id: int) -> EmployeeResponse | None:
        employee = self.repository.get_by_id(employee_id)
        if employee is None:
            return None
        return employee_to_response(employee)

    def create_employee(self, request: CreateEmployeeRequest) -> EmployeeResponse:
        employee = employee_from_create_request(request)
        self.repository.create(employee)
        LOGGER.info("Employee %s successfully created.", employee.id)
        return employee_to_response(employee)

    def update_employee(
        self, employee_id: int, request: UpdateEmployeeRequest
    ) -> EmployeeResponse | None:
        LOGGER.info("Updating employee with id %s.", employee_id)
        existing = self.repository.get_by_id(employee_id)
        if existing is None:
            LOGGER.warning("Employee with id %s not found.", employee_id)
            return None

        self.repository.update(employee_from_update_request(employee_id, request))
        updated = self.repository.get_by_id(employee_id)
        LOGGER.info("Employee with id %s successfully updated.", employee_id)
        return employee_to_response(updated or existing)

    def delete_employee(self, employee_id: int) -> bool:
        employee = self.repository.get_by_id(employee_id)
        if employee is None:
            return False
        self.repository.delete(employee)
        LOGGER.info("Employee with id %s deleted.", employee_id)
        return True

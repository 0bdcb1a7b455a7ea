"""
Rule sets run against employee requests before any repository mutation.

Each validator returns a `ValidationResult` keyed by the wire (camelCase) field name.
`ensure_valid` turns a failed result into `ValidationFailedError`, which the API maps to 400.
The update validator reads the stored employee, so it takes a read-only repository handle.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from src.employees.models import Employee
from src.employees.repository import ReadOnlyRepository
from src.employees.schemas import (
    CreateEmployeeRequest,
    GetAllEmployeesRequest,
    UpdateEmployeeRequest,
)

MAX_RECORDS_PER_PAGE = 100


@dataclass
class ValidationResult:
    errors: dict[str, list[str]] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def add(self, field_name: str, message: str) -> None:
        self.errors.setdefault(field_name, []).append(message)


class ValidationFailedError(Exception):
    def __init__(self, errors: dict[str, list[str]]) -> None:
        self.errors = errors
        super().__init__("One or more validation errors occurred.")


def ensure_valid(result: ValidationResult) -> None:
    if not result.is_valid:
        raise ValidationFailedError(result.errors)


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


class CreateEmployeeRequestValidator:
    def validate(self, request: CreateEmployeeRequest) -> ValidationResult:
        result = ValidationResult()
        if _is_blank(request.first_name):
            result.add("firstName", "'First Name' must not be empty.")
        if _is_blank(request.last_name):
            result.add("lastName", "'Last Name' must not be empty.")
        return result


class GetAllEmployeesRequestValidator:
    def __init__(self, *, max_records_per_page: int = MAX_RECORDS_PER_PAGE) -> None:
        self.max_records_per_page = max_records_per_page

    def validate(self, request: GetAllEmployeesRequest) -> ValidationResult:
        result = ValidationResult()
        # Unset values fall back to defaults and are not checked.
        if request.page is not None and request.page < 1:
            result.add("page", "Page number must be set to a positive number")
        if request.records_per_page is not None:
            if request.records_per_page <= 0:
                result.add("recordsPerPage", "You must return at least one record")
            elif request.records_per_page > self.max_records_per_page:
                result.add(
                    "recordsPerPage",
                    f"You cannot return more than {self.max_records_per_page} records.",
                )
        return result


class UpdateEmployeeRequestValidator:
    """Rejects blanking an address that is already set on the stored employee."""

    def __init__(self, repository: ReadOnlyRepository[Employee]) -> None:
        self._repository = repository

    def validate(self, employee_id: int, request: UpdateEmployeeRequest) -> ValidationResult:
        result = ValidationResult()
        existing = self._repository.get_by_id(employee_id)
        # Missing employees are reported as not found by the handler, not as a field error.
        if existing is None:
            return result
        if existing.address1 is not None and _is_blank(request.address1):
            result.add(
                "address1",
                "Address1 must not be empty as an address was already set for the employee.",
            )
        return result

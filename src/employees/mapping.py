"""
Explicit projections between employee DTOs and entities.
"""

from __future__ import annotations

from src.employees.models import Employee, EmployeeBenefit
from src.employees.schemas import (
    CreateEmployeeRequest,
    EmployeeBenefitResponse,
    EmployeeResponse,
    UpdateEmployeeRequest,
)


def employee_from_create_request(request: CreateEmployeeRequest) -> Employee:
    return Employee(
        first_name=request.first_name,
        last_name=request.last_name,
        social_security_number=request.social_security_number,
        address1=request.address1,
        address2=request.address2,
        city=request.city,
        state=request.state,
        zip_code=request.zip_code,
        phone_number=request.phone_number,
        email=request.email,
    )


def employee_from_update_request(employee_id: int, request: UpdateEmployeeRequest) -> Employee:
    """Build a detached carrier for the mutable fields of an existing employee."""

    return Employee(
        id=employee_id,
        address1=request.address1,
        address2=request.address2,
        city=request.city,
        state=request.state,
        zip_code=request.zip_code,
        phone_number=request.phone_number,
        email=request.email,
    )


def benefit_to_response(enrollment: EmployeeBenefit) -> EmployeeBenefitResponse:
    cost = enrollment.effective_cost
    return EmployeeBenefitResponse(
        id=enrollment.id,
        employee_id=enrollment.employee_id,
        benefit_id=enrollment.benefit_id,
        benefit_name=enrollment.benefit.name if enrollment.benefit is not None else None,
        cost=float(cost) if cost is not None else None,
    )


def employee_to_response(employee: Employee) -> EmployeeResponse:
    return EmployeeResponse(
        id=employee.id,
        first_name=employee.first_name,
        last_name=employee.last_name,
        address1=employee.address1,
        address2=employee.address2,
        city=employee.city,
        state=employee.state,
        zip_code=employee.zip_code,
        phone_number=employee.phone_number,
        email=employee.email,
        benefits=[benefit_to_response(enrollment) for enrollment in employee.benefits],
    )

"""
Request and response models for the employees endpoints, kept independent from the ORM entities.

Models accept and emit camelCase field names; Python code uses snake_case attributes.
Response models never carry the social security number.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreateEmployeeRequest(CamelModel):
    first_name: str | None = None
    last_name: str | None = None
    social_security_number: str | None = None
    address1: str | None = None
    address2: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    phone_number: str | None = None
    email: str | None = None


class UpdateEmployeeRequest(CamelModel):
    address1: str | None = None
    address2: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    phone_number: str | None = None
    email: str | None = None


class GetAllEmployeesRequest(CamelModel):
    page: int | None = None
    records_per_page: int | None = None
    first_name_contains: str | None = None
    last_name_contains: str | None = None


class EmployeeBenefitResponse(CamelModel):
    id: int | None = None
    employee_id: int | None = None
    benefit_id: int | None = None
    benefit_name: str | None = None
    cost: float | None = None


class EmployeeResponse(CamelModel):
    id: int
    first_name: str
    last_name: str
    address1: str | None = None
    address2: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    phone_number: str | None = None
    email: str | None = None
    benefits: list[EmployeeBenefitResponse] = []

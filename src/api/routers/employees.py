# This file defines the /employees CRUD endpoints.
# It exists to translate HTTP verbs, paths, and bodies into employee service calls and status codes.
# Request rules run in dependencies, so a failed rule returns 400 before the handler body executes.
# Update failures from the store are logged with the employee id and returned as a generic 500.

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response, status

from src.api.dependencies import (
    ConfigDep,
    get_employee_service,
    validated_create_request,
    validated_list_request,
    validated_update_request,
)
from src.api.error_handlers import APIError
from src.api.schemas.common import ErrorResponse
from src.api.services.employee_service import EmployeeService
from src.employees.repository import EntityNotFoundError
from src.employees.schemas import (
    CreateEmployeeRequest,
    EmployeeResponse,
    GetAllEmployeesRequest,
    UpdateEmployeeRequest,
)

LOGGER = logging.getLogger("api.employees")

router = APIRouter(prefix="/employees", tags=["employees"])
EmployeeServiceDep = Annotated[EmployeeService, Depends(get_employee_service)]

NOT_FOUND_RESPONSE = {404: {"model": ErrorResponse, "description": "Employee not found."}}
VALIDATION_RESPONSE = {400: {"model": ErrorResponse, "description": "Request rules failed."}}


def _employee_not_found(employee_id: int) -> APIError:
    return APIError(
        status_code=404,
        error_code="EMPLOYEE_NOT_FOUND",
        message=f"Employee {employee_id} was not found.",
    )


@router.get("", response_model=list[EmployeeResponse], responses=VALIDATION_RESPONSE)
def get_all_employees(
    service: EmployeeServiceDep,
    config: ConfigDep,
    request: Annotated[GetAllEmployeesRequest, Depends(validated_list_request)],
) -> list[EmployeeResponse]:
    return service.list_employees(
        request, default_records_per_page=config.default_records_per_page
    )


@router.get("/{employee_id}", response_model=EmployeeResponse, responses=NOT_FOUND_RESPONSE)
def get_employee_by_id(employee_id: int, service: EmployeeServiceDep) -> EmployeeResponse:
    employee = service.get_employee(employee_id)
    if employee is None:
        raise _employee_not_found(employee_id)
    return employee


@router.post(
    "",
    response_model=EmployeeResponse,
    status_code=status.HTTP_201_CREATED,
    responses=VALIDATION_RESPONSE,
)
def create_employee(
    request: Request,
    response: Response,
    service: EmployeeServiceDep,
    body: Annotated[CreateEmployeeRequest, Depends(validated_create_request)],
) -> EmployeeResponse:
    created = service.create_employee(body)
    response.headers["Location"] = str(
        request.url_for("get_employee_by_id", employee_id=str(created.id))
    )
    return created


@router.put(
    "/{employee_id}",
    response_model=EmployeeResponse,
    responses={**NOT_FOUND_RESPONSE, **VALIDATION_RESPONSE},
)
def update_employee(
    employee_id: int,
    service: EmployeeServiceDep,
    body: Annotated[UpdateEmployeeRequest, Depends(validated_update_request)],
) -> EmployeeResponse:
    try:
        updated = service.update_employee(employee_id, body)
    except EntityNotFoundError:
        raise _employee_not_found(employee_id) from None
    except Exception as exc:
        LOGGER.exception("Error occurred while updating employee with id %s.", employee_id)
        raise APIError(
            status_code=500,
            error_code="EMPLOYEE_UPDATE_FAILED",
            message="An error occurred while updating the employee",
        ) from exc

    if updated is None:
        raise _employee_not_found(employee_id)
    return updated


@router.delete(
    "/{employee_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND_RESPONSE,
)
def delete_employee(employee_id: int, service: EmployeeServiceDep) -> Response:
    if not service.delete_employee(employee_id):
        raise _employee_not_found(employee_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

"""Employees router - CRUD, search and filtering of employee records.

Single-record operations accept the identifier either as a path segment
(``/employees/7``) or as a query parameter (``/employees?id=7``).
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError as PydanticValidationError

from employee_api.constants.validation import ADVISORY_DEPARTMENTS
from employee_api.dependencies import get_employee_service
from employee_api.models.dto.employee import (
    EmployeeCreate,
    EmployeeDeleteResponse,
    EmployeeListParams,
    EmployeeResponse,
    EmployeeUpdate,
    ErrorResponse,
)
from employee_api.security.rate_limit import limiter, write_operation_limit
from employee_api.services.employee_query import compose_employee_query
from employee_api.services.employee_service import EmployeeService
from employee_api.utils.validation import parse_employee_id

router = APIRouter()

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid input"},
    404: {"model": ErrorResponse, "description": "Employee not found"},
}


@router.get(
    "/employees",
    response_model=EmployeeResponse | list[EmployeeResponse],
    responses=ERROR_RESPONSES,
)
async def list_employees(
    service: Annotated[EmployeeService, Depends(get_employee_service)],
    employee_id: str | None = Query(default=None, alias="id", description="Employee ID"),
    search: str | None = Query(default=None, description="Matched against names, email, position, department"),
    department: str | None = Query(default=None, description="Exact department"),
    limit: str | None = Query(default=None, description="Page size (default 10, capped at 100)"),
    offset: str | None = Query(default=None, description="Records to skip (default 0)"),
) -> EmployeeResponse | list[EmployeeResponse]:
    """List employees, or get a single one when ``id`` is given.

    ``search`` matches names, email, position and department; ``department``
    is an exact match. Both combine with AND. An ``id`` lookup ignores the
    other parameters, so they are only checked on the list path.
    """
    if employee_id is not None:
        return await service.get_employee(parse_employee_id(employee_id))

    supplied = {"search": search, "department": department, "limit": limit, "offset": offset}
    try:
        params = EmployeeListParams.model_validate(
            {name: value for name, value in supplied.items() if value is not None}
        )
    except PydanticValidationError as e:
        raise RequestValidationError(
            [{**error, "loc": ("query", *error["loc"])} for error in e.errors()]
        ) from e

    query = compose_employee_query(
        search=params.search,
        department=params.department,
        limit=params.limit,
        offset=params.offset,
    )
    return await service.list_employees(query)


@router.get("/employees/departments", response_model=list[str])
async def list_departments(
    service: Annotated[EmployeeService, Depends(get_employee_service)],
) -> list[str]:
    """Get all unique departments in use."""
    return await service.get_departments()


@router.get("/employees/departments/suggested", response_model=list[str])
async def list_suggested_departments() -> list[str]:
    """Get the suggested department names offered to clients.

    Suggestions only: any non-empty department is accepted on write.
    """
    return list(ADVISORY_DEPARTMENTS)


@router.get("/employees/{employee_id}", response_model=EmployeeResponse, responses=ERROR_RESPONSES)
async def get_employee(
    employee_id: str,
    service: Annotated[EmployeeService, Depends(get_employee_service)],
) -> EmployeeResponse:
    """Get a single employee by ID."""
    return await service.get_employee(parse_employee_id(employee_id))


@router.post(
    "/employees",
    response_model=EmployeeResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: ERROR_RESPONSES[400]},
)
@limiter.limit(write_operation_limit)
async def create_employee(
    request: Request,
    body: EmployeeCreate,
    service: Annotated[EmployeeService, Depends(get_employee_service)],
) -> EmployeeResponse:
    """Create a new employee."""
    return await service.create_employee(body)


@router.put("/employees", response_model=EmployeeResponse, responses=ERROR_RESPONSES)
@limiter.limit(write_operation_limit)
async def update_employee_by_query(
    request: Request,
    body: EmployeeUpdate,
    service: Annotated[EmployeeService, Depends(get_employee_service)],
    employee_id: str | None = Query(default=None, alias="id", description="Employee ID"),
) -> EmployeeResponse:
    """Partially update the employee named by the ``id`` query parameter."""
    return await service.update_employee(parse_employee_id(employee_id), body)


@router.put("/employees/{employee_id}", response_model=EmployeeResponse, responses=ERROR_RESPONSES)
@limiter.limit(write_operation_limit)
async def update_employee(
    request: Request,
    employee_id: str,
    body: EmployeeUpdate,
    service: Annotated[EmployeeService, Depends(get_employee_service)],
) -> EmployeeResponse:
    """Partially update an employee. Only the fields sent are changed."""
    return await service.update_employee(parse_employee_id(employee_id), body)


@router.delete("/employees", response_model=EmployeeDeleteResponse, responses=ERROR_RESPONSES)
@limiter.limit(write_operation_limit)
async def delete_employee_by_query(
    request: Request,
    service: Annotated[EmployeeService, Depends(get_employee_service)],
    employee_id: str | None = Query(default=None, alias="id", description="Employee ID"),
) -> EmployeeDeleteResponse:
    """Delete the employee named by the ``id`` query parameter."""
    return await service.delete_employee(parse_employee_id(employee_id))


@router.delete(
    "/employees/{employee_id}",
    response_model=EmployeeDeleteResponse,
    responses=ERROR_RESPONSES,
)
@limiter.limit(write_operation_limit)
async def delete_employee(
    request: Request,
    employee_id: str,
    service: Annotated[EmployeeService, Depends(get_employee_service)],
) -> EmployeeDeleteResponse:
    """Delete an employee permanently."""
    return await service.delete_employee(parse_employee_id(employee_id))

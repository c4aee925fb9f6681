"""Data transfer objects package."""

from employee_api.models.dto.employee import (
    EmployeeCreate,
    EmployeeDeleteResponse,
    EmployeeListParams,
    EmployeeResponse,
    EmployeeUpdate,
    ErrorResponse,
)

__all__ = [
    "EmployeeCreate",
    "EmployeeDeleteResponse",
    "EmployeeListParams",
    "EmployeeResponse",
    "EmployeeUpdate",
    "ErrorResponse",
]

"""Employee DTOs.

Request bodies use camelCase keys on the wire (``firstName``); snake_case
names are accepted as well. Request fields are deliberately loose (every
field optional, salary untyped) so that the validation engine, not pydantic,
decides which rule a payload breaks and reports its error code.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from employee_api.constants.validation import (
    DEFAULT_PAGE_LIMIT,
    MAX_DEPARTMENT_LENGTH,
    MAX_SEARCH_LENGTH,
    MAX_TEXT_FIELD_LENGTH,
)


class EmployeePayload(BaseModel):
    """Fields a client may send when creating or updating an employee."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    first_name: str | None = Field(default=None, max_length=MAX_TEXT_FIELD_LENGTH, description="First name")
    last_name: str | None = Field(default=None, max_length=MAX_TEXT_FIELD_LENGTH, description="Last name")
    email: str | None = Field(default=None, max_length=MAX_TEXT_FIELD_LENGTH, description="Email address, unique")
    position: str | None = Field(default=None, max_length=MAX_TEXT_FIELD_LENGTH, description="Job title")
    department: str | None = Field(default=None, max_length=MAX_TEXT_FIELD_LENGTH, description="Department name")
    salary: Any = Field(default=None, description="Salary, a positive number")
    hire_date: str | None = Field(
        default=None,
        description="Hire date as YYYY-MM-DDTHH:MM:SS.mmmZ",
        examples=["2023-01-01T00:00:00.000Z"],
    )
    phone: str | None = Field(default=None, max_length=MAX_TEXT_FIELD_LENGTH, description="Phone number")


class EmployeeCreate(EmployeePayload):
    """DTO for creating an employee. All fields except phone are required."""

    pass


class EmployeeUpdate(EmployeePayload):
    """DTO for a partial employee update.

    Only the fields present in the request body are validated and applied;
    ``model_fields_set`` tells a field sent as null apart from an absent one.
    """

    def supplied_fields(self) -> dict[str, Any]:
        """Get the fields the client actually sent, keyed by field name."""
        return {name: getattr(self, name) for name in self.model_fields_set}


class EmployeeResponse(BaseModel):
    """Employee response DTO."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: int
    first_name: str
    last_name: str
    email: str
    position: str
    department: str
    salary: float
    hire_date: str
    phone: str | None = None
    created_at: str
    updated_at: str


class EmployeeDeleteResponse(BaseModel):
    """Response for a deleted employee."""

    message: str = "Employee deleted successfully"
    employee: EmployeeResponse


class ErrorResponse(BaseModel):
    """Error body returned for every rejected request."""

    detail: str
    code: str


class EmployeeListParams(BaseModel):
    """Filter and pagination parameters of a list read.

    Checked only when no ``id`` is given; an id lookup ignores them.
    """

    search: str | None = Field(default=None, max_length=MAX_SEARCH_LENGTH)
    department: str | None = Field(default=None, max_length=MAX_DEPARTMENT_LENGTH)
    limit: int = Field(default=DEFAULT_PAGE_LIMIT, ge=1, description="Page size, capped at 100")
    offset: int = Field(default=0, ge=0)

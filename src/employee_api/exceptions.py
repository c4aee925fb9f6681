"""Domain-specific exceptions for the employee API.

These exceptions provide a clean separation between service-layer errors
and HTTP responses. Each carries a stable machine-readable code; the error
handlers map the exception class to its HTTP status.
"""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Machine-readable error codes returned to API clients."""

    # Create: required fields
    MISSING_FIRST_NAME = "MISSING_FIRST_NAME"
    MISSING_LAST_NAME = "MISSING_LAST_NAME"
    MISSING_EMAIL = "MISSING_EMAIL"
    MISSING_POSITION = "MISSING_POSITION"
    MISSING_DEPARTMENT = "MISSING_DEPARTMENT"
    MISSING_SALARY = "MISSING_SALARY"
    MISSING_HIRE_DATE = "MISSING_HIRE_DATE"

    # Update: supplied fields that cannot be blank
    INVALID_FIRST_NAME = "INVALID_FIRST_NAME"
    INVALID_LAST_NAME = "INVALID_LAST_NAME"
    INVALID_EMAIL = "INVALID_EMAIL"
    INVALID_POSITION = "INVALID_POSITION"
    INVALID_DEPARTMENT = "INVALID_DEPARTMENT"

    # Format rules shared by create and update
    INVALID_EMAIL_FORMAT = "INVALID_EMAIL_FORMAT"
    INVALID_SALARY = "INVALID_SALARY"
    INVALID_HIRE_DATE_FORMAT = "INVALID_HIRE_DATE_FORMAT"

    INVALID_ID = "INVALID_ID"
    INVALID_REQUEST = "INVALID_REQUEST"
    EMAIL_EXISTS = "EMAIL_EXISTS"
    EMPLOYEE_NOT_FOUND = "EMPLOYEE_NOT_FOUND"
    RATE_LIMITED = "RATE_LIMITED"
    NOT_FOUND = "NOT_FOUND"
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class EmployeeAPIError(Exception):
    """Base exception for all employee API errors."""

    code: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(
        self,
        message: str = "An error occurred",
        details: dict[str, Any] | None = None,
        code: ErrorCode | None = None,
    ) -> None:
        self.message = message
        self.details = details or {}
        if code is not None:
            self.code = code
        super().__init__(self.message)


# =============================================================================
# Resource Not Found Errors (404)
# =============================================================================


class NotFoundError(EmployeeAPIError):
    """Base class for resource not found errors."""

    pass


class EmployeeNotFoundError(NotFoundError):
    """Raised when an employee cannot be found."""

    code = ErrorCode.EMPLOYEE_NOT_FOUND

    def __init__(self, employee_id: int | None = None) -> None:
        details = {"employee_id": employee_id} if employee_id is not None else {}
        super().__init__("Employee not found", details)


# =============================================================================
# Conflict Errors (reported as 400 to keep the public contract)
# =============================================================================


class ConflictError(EmployeeAPIError):
    """Base class for resource conflict errors."""

    pass


class EmailAlreadyExistsError(ConflictError):
    """Raised when an email is already used by another employee."""

    code = ErrorCode.EMAIL_EXISTS

    def __init__(self) -> None:
        super().__init__("Email already exists")


# =============================================================================
# Validation Errors (400)
# =============================================================================


class ValidationError(EmployeeAPIError):
    """Base class for validation errors."""

    pass


class EmployeeValidationError(ValidationError):
    """Raised for the first field rule an employee payload violates."""

    def __init__(self, code: ErrorCode, message: str, field: str | None = None) -> None:
        details = {"field": field} if field else {}
        super().__init__(message, details, code=code)


class InvalidEmployeeIdError(ValidationError):
    """Raised when an employee identifier is not an integer."""

    code = ErrorCode.INVALID_ID

    def __init__(self) -> None:
        super().__init__("Valid ID is required")

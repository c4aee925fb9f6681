"""Validation and sanitization of employee payloads.

Rules run in a fixed order and the first violated rule is reported, so a
rejected payload always carries exactly one error code. Accepted payloads
come back normalized: text trimmed, email lower-cased, blank phone as None.

Email uniqueness needs a storage read and is checked by ``EmployeeService``
once every rule here has passed.
"""

import math
from collections.abc import Callable
from functools import partial
from typing import Any

from employee_api.constants.validation import EMAIL_PATTERN, HIRE_DATE_PATTERN
from employee_api.exceptions import EmployeeValidationError, ErrorCode
from employee_api.models.dto.employee import EmployeeCreate, EmployeeUpdate


def _clean_text(value: str | None) -> str | None:
    """Trim a text value, mapping None and blank strings to None."""
    if value is None:
        return None
    return value.strip() or None


def _require_text(value: str | None, code: ErrorCode, message: str, field: str) -> str:
    cleaned = _clean_text(value)
    if cleaned is None:
        raise EmployeeValidationError(code, message, field)
    return cleaned


def _normalize_email(value: str | None, blank_code: ErrorCode, blank_message: str) -> str:
    email = _require_text(value, blank_code, blank_message, "email").lower()
    if not EMAIL_PATTERN.match(email):
        raise EmployeeValidationError(
            ErrorCode.INVALID_EMAIL_FORMAT, "Invalid email format", "email"
        )
    return email


def _normalize_salary(value: Any) -> float:
    """Accept JSON numbers only; booleans and numeric strings are rejected."""
    invalid = EmployeeValidationError(
        ErrorCode.INVALID_SALARY, "Salary must be a positive number", "salary"
    )
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise invalid
    try:
        salary = float(value)
    except OverflowError:
        raise invalid from None
    if not math.isfinite(salary) or salary <= 0:
        raise invalid
    return salary


def _normalize_hire_date(value: str | None) -> str:
    hire_date = _clean_text(value)
    if hire_date is None or not HIRE_DATE_PATTERN.match(hire_date):
        raise EmployeeValidationError(
            ErrorCode.INVALID_HIRE_DATE_FORMAT, "Hire date must be in ISO format", "hire_date"
        )
    return hire_date


def normalize_phone(value: str | None) -> str | None:
    """Phone is freeform; blank input is stored as None on every write path."""
    return _clean_text(value)


def validate_create(data: EmployeeCreate) -> dict[str, Any]:
    """Validate and normalize a create payload.

    Args:
        data: Create request body

    Returns:
        Normalized column values, keyed by ORM attribute name

    Raises:
        EmployeeValidationError: For the first rule the payload violates
    """
    first_name = _require_text(
        data.first_name, ErrorCode.MISSING_FIRST_NAME, "First name is required", "first_name"
    )
    last_name = _require_text(
        data.last_name, ErrorCode.MISSING_LAST_NAME, "Last name is required", "last_name"
    )
    email = _normalize_email(data.email, ErrorCode.MISSING_EMAIL, "Email is required")
    position = _require_text(
        data.position, ErrorCode.MISSING_POSITION, "Position is required", "position"
    )
    department = _require_text(
        data.department, ErrorCode.MISSING_DEPARTMENT, "Department is required", "department"
    )

    if data.salary is None:
        raise EmployeeValidationError(ErrorCode.MISSING_SALARY, "Salary is required", "salary")
    salary = _normalize_salary(data.salary)

    if _clean_text(data.hire_date) is None:
        raise EmployeeValidationError(
            ErrorCode.MISSING_HIRE_DATE, "Hire date is required", "hire_date"
        )
    hire_date = _normalize_hire_date(data.hire_date)

    return {
        "first_name": first_name,
        "last_name": last_name,
        "email": email,
        "position": position,
        "department": department,
        "salary": salary,
        "hire_date": hire_date,
        "phone": normalize_phone(data.phone),
    }


# Checked in this order; a field sent as null is treated like a blank one
_UPDATE_RULES: tuple[tuple[str, Callable[[Any], Any]], ...] = (
    (
        "first_name",
        partial(
            _require_text,
            code=ErrorCode.INVALID_FIRST_NAME,
            message="First name cannot be empty",
            field="first_name",
        ),
    ),
    (
        "last_name",
        partial(
            _require_text,
            code=ErrorCode.INVALID_LAST_NAME,
            message="Last name cannot be empty",
            field="last_name",
        ),
    ),
    (
        "email",
        partial(
            _normalize_email,
            blank_code=ErrorCode.INVALID_EMAIL,
            blank_message="Email cannot be empty",
        ),
    ),
    (
        "position",
        partial(
            _require_text,
            code=ErrorCode.INVALID_POSITION,
            message="Position cannot be empty",
            field="position",
        ),
    ),
    (
        "department",
        partial(
            _require_text,
            code=ErrorCode.INVALID_DEPARTMENT,
            message="Department cannot be empty",
            field="department",
        ),
    ),
    ("salary", _normalize_salary),
    ("hire_date", _normalize_hire_date),
    ("phone", normalize_phone),
)


def validate_update(data: EmployeeUpdate) -> dict[str, Any]:
    """Validate and normalize the fields supplied in a partial update.

    Args:
        data: Update request body

    Returns:
        Normalized values for the supplied fields only (may be empty)

    Raises:
        EmployeeValidationError: For the first rule the payload violates
    """
    supplied = data.supplied_fields()
    changes: dict[str, Any] = {}
    for field, rule in _UPDATE_RULES:
        if field in supplied:
            changes[field] = rule(supplied[field])
    return changes

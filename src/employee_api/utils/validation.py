"""Input normalization helpers for query parameters."""

from employee_api.constants.validation import (
    MAX_DEPARTMENT_LENGTH,
    MAX_EMPLOYEE_ID,
    MAX_SEARCH_LENGTH,
)
from employee_api.exceptions import InvalidEmployeeIdError


def sanitize_search(search: str | None, max_length: int = MAX_SEARCH_LENGTH) -> str | None:
    """Sanitize search input.

    Args:
        search: Raw search string
        max_length: Maximum allowed length

    Returns:
        Trimmed search string, or None when nothing is left to search for
    """
    if search is None:
        return None

    # Truncate to max length
    search = search[:max_length]

    return search.strip() or None


def sanitize_department(
    department: str | None, max_length: int = MAX_DEPARTMENT_LENGTH
) -> str | None:
    """Sanitize department filter input.

    Departments are freeform, so the value is only trimmed and truncated;
    it is compared with an exact, parameterized match.

    Args:
        department: Raw department string
        max_length: Maximum allowed length

    Returns:
        Sanitized department string or None
    """
    if department is None:
        return None

    return department[:max_length].strip() or None


def escape_like_wildcards(value: str) -> str:
    """Escape SQL LIKE wildcards so they match literally.

    The % and _ characters have special meaning in SQL LIKE patterns:
    - % matches any sequence of characters
    - _ matches any single character

    Args:
        value: Raw string value to escape

    Returns:
        Escaped string for use in LIKE patterns with ``escape="\\\\"``

    Example:
        >>> escape_like_wildcards("test%value")
        'test\\\\%value'
        >>> escape_like_wildcards("test_value")
        'test\\\\_value'
    """
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def parse_employee_id(raw_id: str | int | None) -> int:
    """Parse an employee identifier from a path or query parameter.

    Only plain base-10 integers are accepted; ``"12abc"``, ``"1.5"`` and the
    empty string are rejected.

    Args:
        raw_id: Raw identifier value

    Returns:
        Parsed identifier

    Raises:
        InvalidEmployeeIdError: If the value is not an integer
    """
    if isinstance(raw_id, bool) or raw_id is None:
        raise InvalidEmployeeIdError()
    if isinstance(raw_id, int):
        return raw_id

    value = raw_id.strip()
    digits = value[1:] if value[:1] in ("-", "+") else value
    if not digits.isascii() or not digits.isdigit():
        raise InvalidEmployeeIdError()

    employee_id = int(value)
    # Identifiers are stored as signed 64-bit integers
    if abs(employee_id) > MAX_EMPLOYEE_ID:
        raise InvalidEmployeeIdError()
    return employee_id

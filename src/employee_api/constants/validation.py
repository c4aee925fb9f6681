"""Centralized validation constants for the employee API.

This module provides a single source of truth for the patterns, defaults and
limits used across routers and services.
"""

import re
from typing import Final

# =============================================================================
# Employee Field Constants
# =============================================================================

# Basic local@domain.tld shape; deliverability is not checked
EMAIL_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

# Hire dates must be full ISO-8601 UTC date-times with milliseconds
HIRE_DATE_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$"
)

MAX_TEXT_FIELD_LENGTH: Final[int] = 255

# Offered to clients as choices; the server accepts any non-empty department
ADVISORY_DEPARTMENTS: Final[tuple[str, ...]] = (
    "Engineering",
    "Marketing",
    "Sales",
    "HR",
    "Finance",
)

# =============================================================================
# Pagination Constants
# =============================================================================

DEFAULT_PAGE_LIMIT: Final[int] = 10
MAX_PAGE_LIMIT: Final[int] = 100
MAX_EMPLOYEE_ID: Final[int] = 2**63 - 1

# =============================================================================
# Text Length Constants
# =============================================================================

MAX_SEARCH_LENGTH: Final[int] = 200
MAX_DEPARTMENT_LENGTH: Final[int] = 255

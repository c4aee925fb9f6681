"""Composition of employee list queries from request parameters."""

from dataclasses import dataclass

from sqlalchemy import Select, and_, or_, select
from sqlalchemy.sql.elements import ColumnElement

from employee_api.constants.validation import DEFAULT_PAGE_LIMIT, MAX_PAGE_LIMIT
from employee_api.models.orm.employee import EmployeeORM
from employee_api.utils.validation import (
    escape_like_wildcards,
    sanitize_department,
    sanitize_search,
)

# Columns a free-text search term is matched against (OR semantics)
SEARCH_COLUMNS = (
    EmployeeORM.first_name,
    EmployeeORM.last_name,
    EmployeeORM.email,
    EmployeeORM.position,
    EmployeeORM.department,
)


@dataclass(frozen=True)
class EmployeeQuery:
    """Normalized filter, limit and offset for an employee list read."""

    search: str | None = None
    department: str | None = None
    limit: int = DEFAULT_PAGE_LIMIT
    offset: int = 0

    def conditions(self) -> list[ColumnElement[bool]]:
        """Build the WHERE conditions; all of them must hold."""
        conditions: list[ColumnElement[bool]] = []

        if self.search:
            # Escape LIKE wildcards so the term matches literally
            pattern = f"%{escape_like_wildcards(self.search)}%"
            conditions.append(
                or_(*(column.ilike(pattern, escape="\\") for column in SEARCH_COLUMNS))
            )

        if self.department:
            conditions.append(EmployeeORM.department == self.department)

        return conditions

    def statement(self) -> Select[tuple[EmployeeORM]]:
        """Build the SELECT statement: filters, then order, then pagination."""
        query = select(EmployeeORM)
        conditions = self.conditions()
        if conditions:
            query = query.where(and_(*conditions))
        # Ordered by id so that consecutive pages never overlap
        return query.order_by(EmployeeORM.id.asc()).limit(self.limit).offset(self.offset)


def compose_employee_query(
    search: str | None = None,
    department: str | None = None,
    limit: int | None = None,
    offset: int | None = None,
) -> EmployeeQuery:
    """Normalize list parameters into an ``EmployeeQuery``.

    Args:
        search: Free-text term matched against names, email, position and department
        department: Exact department filter, combined with search using AND
        limit: Page size; defaults to 10 and is capped at 100
        offset: Number of records to skip; defaults to 0

    Returns:
        Normalized query specification
    """
    if limit is None or limit < 1:
        limit = DEFAULT_PAGE_LIMIT
    if offset is None or offset < 0:
        offset = 0

    return EmployeeQuery(
        search=sanitize_search(search),
        department=sanitize_department(department),
        limit=min(limit, MAX_PAGE_LIMIT),
        offset=offset,
    )

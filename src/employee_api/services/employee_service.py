"""Employee service: validated writes and filtered reads of employee records."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from employee_api.exceptions import EmailAlreadyExistsError, EmployeeNotFoundError
from employee_api.models.dto.employee import (
    EmployeeCreate,
    EmployeeDeleteResponse,
    EmployeeResponse,
    EmployeeUpdate,
)
from employee_api.models.orm.employee import EmployeeORM
from employee_api.repositories.employee_repository import EmployeeRepository
from employee_api.services.employee_query import EmployeeQuery
from employee_api.services.employee_validation import validate_create, validate_update
from employee_api.utils.datetime_utils import utc_now_iso

logger = logging.getLogger(__name__)


def is_email_conflict(exc: IntegrityError) -> bool:
    """Check whether an integrity error comes from the unique email constraint.

    SQLite reports ``UNIQUE constraint failed: employees.email``, PostgreSQL
    ``duplicate key value violates unique constraint "employees_email_key"``.
    """
    message = str(exc.orig).lower()
    return "email" in message and ("unique" in message or "duplicate" in message)


class EmployeeService:
    """Service for employee operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize service with database session."""
        self.session = session
        self.employee_repo = EmployeeRepository(session)

    async def _get_or_raise(self, employee_id: int) -> EmployeeORM:
        employee = await self.employee_repo.get_by_id(employee_id)
        if employee is None:
            raise EmployeeNotFoundError(employee_id)
        return employee

    async def get_employee(self, employee_id: int) -> EmployeeResponse:
        """Get a single employee.

        Raises:
            EmployeeNotFoundError: If no employee has this ID
        """
        employee = await self._get_or_raise(employee_id)
        return EmployeeResponse.model_validate(employee)

    async def list_employees(self, query: EmployeeQuery) -> list[EmployeeResponse]:
        """List employees matching a composed query (possibly none)."""
        employees = await self.employee_repo.find(query)
        return [EmployeeResponse.model_validate(emp) for emp in employees]

    async def get_departments(self) -> list[str]:
        """Get all unique departments currently in use."""
        return await self.employee_repo.get_all_departments()

    async def create_employee(self, data: EmployeeCreate) -> EmployeeResponse:
        """Create an employee.

        Args:
            data: Employee creation data

        Returns:
            Created EmployeeResponse

        Raises:
            EmployeeValidationError: If a field rule is violated
            EmailAlreadyExistsError: If the email is already in use
        """
        values = validate_create(data)

        # Pre-check is not atomic with the insert; the unique constraint
        # below catches a concurrent duplicate.
        if await self.employee_repo.email_exists(values["email"]):
            raise EmailAlreadyExistsError()

        now = utc_now_iso()
        try:
            employee = await self.employee_repo.create(
                **values,
                created_at=now,
                updated_at=now,
            )
        except IntegrityError as exc:
            await self.session.rollback()
            if is_email_conflict(exc):
                logger.warning("Email uniqueness race detected on employee create")
                raise EmailAlreadyExistsError() from exc
            raise

        logger.info(f"Created employee {employee.id}")
        # Note: Commit handled by get_db() dependency after endpoint completes
        return EmployeeResponse.model_validate(employee)

    async def update_employee(self, employee_id: int, data: EmployeeUpdate) -> EmployeeResponse:
        """Apply a partial update to an employee.

        Only the fields present in ``data`` change; ``updated_at`` is always
        refreshed.

        Args:
            employee_id: Employee ID
            data: Fields to update

        Returns:
            Updated EmployeeResponse

        Raises:
            EmployeeNotFoundError: If no employee has this ID
            EmployeeValidationError: If a supplied field is invalid
            EmailAlreadyExistsError: If the new email belongs to another employee
        """
        employee = await self._get_or_raise(employee_id)

        changes = validate_update(data)

        if "email" in changes and await self.employee_repo.email_exists(
            changes["email"], exclude_id=employee_id
        ):
            raise EmailAlreadyExistsError()

        changes["updated_at"] = utc_now_iso()
        try:
            employee = await self.employee_repo.update(employee, **changes)
        except IntegrityError as exc:
            await self.session.rollback()
            if is_email_conflict(exc):
                logger.warning(f"Email uniqueness race detected on employee {employee_id} update")
                raise EmailAlreadyExistsError() from exc
            raise

        logger.info(f"Updated employee {employee_id}: {sorted(changes)}")
        return EmployeeResponse.model_validate(employee)

    async def delete_employee(self, employee_id: int) -> EmployeeDeleteResponse:
        """Delete an employee permanently.

        Returns:
            Confirmation message with the deleted record

        Raises:
            EmployeeNotFoundError: If no employee has this ID
        """
        employee = await self._get_or_raise(employee_id)
        deleted = EmployeeResponse.model_validate(employee)

        await self.employee_repo.delete(employee)

        logger.info(f"Deleted employee {employee_id}")
        return EmployeeDeleteResponse(employee=deleted)

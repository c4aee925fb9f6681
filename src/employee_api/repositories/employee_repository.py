"""Employee repository."""

from sqlalchemy import func, select

from employee_api.models.orm.employee import EmployeeORM
from employee_api.repositories.base import BaseRepository
from employee_api.services.employee_query import EmployeeQuery


class EmployeeRepository(BaseRepository[EmployeeORM]):
    """Repository for employee operations."""

    model = EmployeeORM

    async def email_exists(self, email: str, exclude_id: int | None = None) -> bool:
        """Check if an email already exists.

        Args:
            email: Email to check, compared case-insensitively
            exclude_id: Optionally exclude an employee ID from the check

        Returns:
            True if email exists, False otherwise
        """
        query = select(func.count()).select_from(EmployeeORM).where(
            func.lower(EmployeeORM.email) == email.lower()
        )
        if exclude_id is not None:
            query = query.where(EmployeeORM.id != exclude_id)
        result = await self.session.execute(query)
        return result.scalar_one() > 0

    async def find(self, query: EmployeeQuery) -> list[EmployeeORM]:
        """Get employees matching a composed list query.

        Args:
            query: Filters and pagination from compose_employee_query()

        Returns:
            Matching employees ordered by ID
        """
        result = await self.session.execute(query.statement())
        return list(result.scalars().all())

    async def get_all_departments(self) -> list[str]:
        """Get all unique departments.

        Returns:
            Sorted list of department names
        """
        result = await self.session.execute(
            select(EmployeeORM.department).distinct().order_by(EmployeeORM.department)
        )
        return [r[0] for r in result.all()]

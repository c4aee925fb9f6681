#!/usr/bin/env python
"""Create an employee record directly against the configured database."""

import asyncio
import sys
from pathlib import Path

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from employee_api.config import get_settings
from employee_api.database import Database
from employee_api.exceptions import EmployeeAPIError
from employee_api.models.dto.employee import EmployeeCreate
from employee_api.services.employee_service import EmployeeService


async def create_employee(data: EmployeeCreate) -> bool:
    """Create an employee with the same validation the API applies."""
    database = Database.from_settings(get_settings())
    try:
        await database.create_all()
        async with database.session_maker() as session:
            service = EmployeeService(session)
            try:
                employee = await service.create_employee(data)
            except EmployeeAPIError as e:
                print(f"Employee not created: {e.code} - {e.message}")
                return False
            await session.commit()
            print(f"Employee created: {employee.id} ({employee.email})")
            return True
    finally:
        await database.dispose()


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser(description="Create an employee")
    parser.add_argument("--first-name", required=True, help="First name")
    parser.add_argument("--last-name", required=True, help="Last name")
    parser.add_argument("--email", required=True, help="Email address")
    parser.add_argument("--position", required=True, help="Job title")
    parser.add_argument("--department", required=True, help="Department name")
    parser.add_argument("--salary", required=True, type=float, help="Salary, a positive number")
    parser.add_argument(
        "--hire-date", required=True, help="Hire date, e.g. 2023-01-01T00:00:00.000Z"
    )
    parser.add_argument("--phone", help="Phone number")
    args = parser.parse_args()

    payload = EmployeeCreate(
        first_name=args.first_name,
        last_name=args.last_name,
        email=args.email,
        position=args.position,
        department=args.department,
        salary=args.salary,
        hire_date=args.hire_date,
        phone=args.phone,
    )
    created = asyncio.run(create_employee(payload))
    sys.exit(0 if created else 1)

"""Employee ORM model."""

from sqlalchemy import Float, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from employee_api.models.orm.base import ISO_TIMESTAMP_LENGTH, Base, IntegerIDMixin, TimestampMixin


class EmployeeORM(Base, IntegerIDMixin, TimestampMixin):
    """Employee database model."""

    __tablename__ = "employees"

    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    # Stored lower-cased, so the unique constraint is case-insensitive in effect
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    position: Mapped[str] = mapped_column(String(255), nullable=False)
    department: Mapped[str] = mapped_column(String(255), nullable=False)
    salary: Mapped[float] = mapped_column(Float, nullable=False)
    hire_date: Mapped[str] = mapped_column(String(ISO_TIMESTAMP_LENGTH), nullable=False)
    phone: Mapped[str | None] = mapped_column(String(255), nullable=True)

    __table_args__ = (
        Index("idx_employees_department", "department"),
        # Ids of deleted rows are never handed out again
        {"sqlite_autoincrement": True},
    )

"""SQLAlchemy declarative base and shared column mixins."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

# ISO-8601 UTC timestamps with millisecond precision, e.g. 2024-05-01T09:30:00.000Z
ISO_TIMESTAMP_LENGTH = 24


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class IntegerIDMixin:
    """Auto-incrementing integer primary key."""

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)


class TimestampMixin:
    """Creation and modification timestamps.

    Values are written by the service layer, not by database defaults, so they
    keep the same textual form on every storage backend.
    """

    created_at: Mapped[str] = mapped_column(String(ISO_TIMESTAMP_LENGTH), nullable=False)
    updated_at: Mapped[str] = mapped_column(String(ISO_TIMESTAMP_LENGTH), nullable=False)

"""Database connection and session management."""

from collections.abc import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from employee_api.config import Settings
from employee_api.models.orm.base import Base


class Database:
    """Storage client owning the async engine and its session factory.

    Constructed by the process entry point (the application lifespan) or
    handed to ``create_app`` directly, then shared through ``app.state``.
    """

    def __init__(self, engine: AsyncEngine) -> None:
        self.engine = engine
        self.session_maker = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        """Build a database for the configured connection target.

        Args:
            settings: Application settings

        Returns:
            Database bound to a new engine
        """
        if settings.is_sqlite:
            engine = create_async_engine(settings.async_database_url, echo=False)
        else:
            engine = create_async_engine(
                settings.async_database_url,
                pool_size=settings.database_pool_size,
                max_overflow=settings.database_max_overflow,
                # Validate connections before checkout to detect stale connections
                pool_pre_ping=True,
                # Recycle connections after 1 hour (important for cloud proxies)
                pool_recycle=3600,
                # Never echo SQL statements as they may contain personal data
                echo=False,
            )
        return cls(engine)

    async def create_all(self) -> None:
        """Create all tables that do not exist yet."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        """Close all pooled connections."""
        await self.engine.dispose()


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Get database session dependency.

    Commits after the handler returns, rolls back on any error.
    """
    database: Database = request.app.state.database
    async with database.session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise

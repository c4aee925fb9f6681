"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from employee_api.config import Settings, get_settings
from employee_api.database import Database
from employee_api.exceptions import EmployeeAPIError
from employee_api.middleware import RequestIDMiddleware, SecurityHeadersMiddleware
from employee_api.middleware.error_handler import (
    employee_api_exception_handler,
    generic_exception_handler,
    http_exception_handler,
    rate_limit_exceeded_handler,
    sqlalchemy_exception_handler,
    validation_exception_handler,
)
from employee_api.routers import employees
from employee_api.security.rate_limit import configure_rate_limit, limiter
from employee_api.utils.secure_logging import configure_logging

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    database: Database | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings to use instead of the environment-derived ones; read
            by handlers and middleware through ``app.state.settings``
        database: Storage client to use; when omitted, the lifespan builds one
            from settings and disposes it on shutdown

    Returns:
        Configured application
    """
    config = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan handler."""
        # Startup
        configure_logging(config.log_level)
        owns_database = app.state.database is None
        if owns_database:
            app.state.database = Database.from_settings(config)
        if config.auto_create_tables:
            await app.state.database.create_all()
        logger.info(f"{config.app_name} started ({config.environment})")
        yield
        # Shutdown
        if owns_database:
            await app.state.database.dispose()
            app.state.database = None

    app = FastAPI(
        title=config.app_name,
        version="0.1.0",
        description="Employee Records API",
        lifespan=lifespan,
        docs_url="/docs" if config.debug else None,
        redoc_url="/redoc" if config.debug else None,
    )
    app.state.settings = config
    app.state.database = database

    # Rate limiting
    configure_rate_limit(config)
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # Domain errors carry their own code; everything else is sanitized
    app.add_exception_handler(EmployeeAPIError, employee_api_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    # Middleware order matters! Starlette processes middleware in REVERSE order of addition.
    # Security headers run last on request, first on response.
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # CORS middleware - MUST be added last so it runs FIRST on incoming requests
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "X-Requested-With", "X-Request-ID"],
        expose_headers=["X-Request-ID"],
    )

    # Include routers
    app.include_router(employees.router, prefix="/api", tags=["Employees"])

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()

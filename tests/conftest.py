"""Shared fixtures: an application bound to an in-memory SQLite database."""

from collections.abc import AsyncGenerator
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from employee_api.config import Settings
from employee_api.database import Database
from employee_api.main import create_app


def employee_payload(**overrides: Any) -> dict[str, Any]:
    """Build a valid create body in wire (camelCase) form."""
    payload = {
        "firstName": "John",
        "lastName": "Doe",
        "email": "john.doe@example.com",
        "position": "Developer",
        "department": "Engineering",
        "salary": 75000,
        "hireDate": "2023-01-01T00:00:00.000Z",
        "phone": "+1-555-0123",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def settings() -> Settings:
    return Settings(
        database_url="sqlite:///:memory:",
        environment="development",
        debug=False,
        rate_limit_enabled=False,
        _env_file=None,
    )


@pytest.fixture
async def database() -> AsyncGenerator[Database, None]:
    # One shared connection so every session sees the same in-memory database
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    db = Database(engine)
    await db.create_all()
    yield db
    await db.dispose()


@pytest.fixture
def app(settings: Settings, database: Database):
    return create_app(settings=settings, database=database)


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def unsafe_client(app) -> AsyncGenerator[AsyncClient, None]:
    """Client that receives 500 responses instead of re-raised app errors."""
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def make_payload():
    return employee_payload


@pytest.fixture
async def create_employee(client: AsyncClient):
    """Create an employee through the API and return the response body."""

    async def _create(**overrides: Any) -> dict[str, Any]:
        response = await client.post("/api/employees", json=employee_payload(**overrides))
        assert response.status_code == 201, response.text
        return response.json()

    return _create

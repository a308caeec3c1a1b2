"""
Servicios API — Test Configuration (conftest.py)
=================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped, created fresh for each test):
    ├── test_settings: Settings pointing at a SQLite file in tmp_path
    ├── gateway:       Real StorageGateway over that file, tables created
    ├── test_client:   HTTPX AsyncClient talking to an app built around `gateway`
    ├── mock_gateway:  MagicMock gateway with an AsyncMock `execute`
    └── sample_user_payload: Body for POST /api/users
"""

import os
import tempfile

# Override settings for testing BEFORE any app imports:
# importing app.main builds a module-level app from the environment
os.environ["DATABASE_URL"] = (
    f"sqlite+aiosqlite:///{tempfile.mkdtemp(prefix='servicios_test_')}/import.db"
)
os.environ["LOG_LEVEL"] = "WARNING"

from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.config import Settings
from app.database import create_gateway
from app.bootstrap import init_schema


@pytest.fixture
def test_settings(tmp_path):
    """Settings for a throwaway SQLite database inside pytest's tmp_path."""
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        log_level="WARNING",
        port=3000,
    )


@pytest_asyncio.fixture
async def gateway(test_settings):
    """
    Provides a real storage gateway with the three tables created.

    SQLite runs with foreign keys enabled, so users.role_id behaves like MySQL.
    """
    gw = create_gateway(test_settings)
    assert await init_schema(gw) is True
    yield gw
    await gw.dispose()


@pytest_asyncio.fixture
async def test_client(test_settings, gateway):
    """
    Provides an async HTTP test client for endpoint testing.

    ASGITransport does not run the lifespan; the `gateway` fixture has
    already created the tables.

    Usage:
        async def test_list_roles(test_client):
            response = await test_client.get("/api/roles")
            assert response.status_code == 200
    """
    from app.main import create_app

    app = create_app(settings=test_settings, gateway=gateway)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def mock_gateway():
    """
    Provides a mock storage gateway.

    Usage:
        mock_gateway.execute.return_value = QueryResult(last_insert_id=7)
        mock_gateway.execute.side_effect = QueryError()
    """
    gateway = MagicMock()
    gateway.execute = AsyncMock()
    return gateway


@pytest.fixture
def sample_user_payload():
    return {
        "identificacion": "123",
        "nombres": "Ana",
        "apellidos": "Lopez",
        "email": "a@x.com",
        "password": "pw",
        "telefono": "3001234567",
        "direccion": "Calle 1",
        "sexo": "F",
        "edad": 30,
        "estatus": "activo",
    }

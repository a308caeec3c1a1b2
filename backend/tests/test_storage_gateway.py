"""
Servicios API — Storage Gateway Tests
======================================

What:  Tests for StorageGateway against a real SQLite database.
How:   Uses the `gateway` fixture (tables already created).

What we test:
    ✅ Reads return dict rows; writes return insert id / affected rows
    ✅ SQL text with named binds and Core constructs both work
    ✅ Malformed SQL → QueryError; foreign key violation → ConstraintViolation
    ✅ Unreachable database → StorageConnectionError
    ✅ transaction() rolls back on error
"""

import pytest
from sqlalchemy import insert, select

from app.config import Settings
from app.database import create_gateway
from app.exceptions import ConstraintViolation, QueryError, StorageConnectionError
from app.models.role import Role


class TestExecute:

    @pytest.mark.asyncio
    async def test_text_insert_reports_generated_ids(self, gateway):
        first = await gateway.execute("INSERT INTO roles (name) VALUES (:name)", {"name": "Admin"})
        second = await gateway.execute("INSERT INTO roles (name) VALUES (:name)", {"name": "Ventas"})

        assert first.last_insert_id == 1
        assert second.last_insert_id == 2
        assert first.affected_rows == 1

    @pytest.mark.asyncio
    async def test_core_insert_reports_generated_id(self, gateway):
        result = await gateway.execute(insert(Role).values(name="Admin"))
        assert result.last_insert_id == 1

    @pytest.mark.asyncio
    async def test_select_returns_rows_as_dicts(self, gateway):
        await gateway.execute(insert(Role).values(name="Admin"))

        result = await gateway.execute(select(Role))

        assert result.rows == [{"id": 1, "name": "Admin"}]
        assert result.first() == {"id": 1, "name": "Admin"}

    @pytest.mark.asyncio
    async def test_empty_select_has_no_first_row(self, gateway):
        result = await gateway.execute("SELECT id FROM roles WHERE id = :id", {"id": 42})
        assert result.rows == []
        assert result.first() is None

    @pytest.mark.asyncio
    async def test_delete_of_missing_row_affects_nothing(self, gateway):
        result = await gateway.execute("DELETE FROM roles WHERE id = :id", {"id": 42})
        assert result.affected_rows == 0
        assert result.last_insert_id is None

    @pytest.mark.asyncio
    async def test_malformed_sql_raises_query_error(self, gateway):
        with pytest.raises(QueryError) as exc_info:
            await gateway.execute("SELEC nonsense FROM nowhere")
        assert "driver_error" in exc_info.value.context

    @pytest.mark.asyncio
    async def test_foreign_key_violation_raises_constraint_violation(self, gateway):
        with pytest.raises(ConstraintViolation):
            await gateway.execute(
                "INSERT INTO users (identificacion, nombres, apellidos, email, password, role_id) "
                "VALUES ('1', 'Ana', 'Lopez', 'a@x.com', 'pw', 999)"
            )

    @pytest.mark.asyncio
    async def test_ping(self, gateway):
        assert await gateway.ping() is True


class TestConnectionFailure:

    @pytest.mark.asyncio
    async def test_unreachable_database_raises_connection_error(self, tmp_path):
        missing_dir = tmp_path / "does-not-exist" / "nested"
        settings = Settings(database_url=f"sqlite+aiosqlite:///{missing_dir / 'x.db'}")
        gw = create_gateway(settings)
        try:
            with pytest.raises(StorageConnectionError):
                await gw.execute("SELECT 1")
        finally:
            await gw.dispose()


class TestTransaction:

    @pytest.mark.asyncio
    async def test_commits_on_success(self, gateway):
        async with gateway.transaction() as tx:
            await tx.execute(insert(Role).values(name="Admin"))
            await tx.execute(insert(Role).values(name="Ventas"))

        result = await gateway.execute(select(Role))
        assert [row["name"] for row in result.rows] == ["Admin", "Ventas"]

    @pytest.mark.asyncio
    async def test_rolls_back_on_error(self, gateway):
        with pytest.raises(RuntimeError):
            async with gateway.transaction() as tx:
                await tx.execute(insert(Role).values(name="Admin"))
                raise RuntimeError("abort")

        result = await gateway.execute(select(Role))
        assert result.rows == []

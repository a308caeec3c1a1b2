"""
Servicios API — /api/roles Endpoint Tests
==========================================

What:  HTTP-level tests for role creation, listing and guarded deletion.
How:   httpx AsyncClient over ASGITransport, real SQLite database.
"""

import pytest


async def _create_role(client, name="Admin"):
    response = await client.post("/api/roles", json={"name": name})
    assert response.status_code == 200
    return response.json()["data"]


async def _create_user(client, payload, role_id):
    response = await client.post("/api/users", json={**payload, "role_id": role_id})
    assert response.status_code == 200
    return response.json()["data"]


class TestCreateRole:

    @pytest.mark.asyncio
    async def test_create_role(self, test_client):
        response = await test_client.post("/api/roles", json={"name": "Admin"})

        assert response.status_code == 200
        assert response.json() == {"success": True, "data": {"id": 1, "name": "Admin"}}

    @pytest.mark.asyncio
    async def test_created_role_is_listed(self, test_client):
        created = await _create_role(test_client, "Ventas")

        response = await test_client.get("/api/roles")

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert created in body["data"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [{}, {"name": ""}, {"name": None}])
    async def test_missing_name(self, test_client, body):
        response = await test_client.post("/api/roles", json=body)

        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "El nombre es requerido."}
        assert (await test_client.get("/api/roles")).json()["data"] == []

    @pytest.mark.asyncio
    async def test_numeric_name_is_stored_as_text(self, test_client):
        response = await test_client.post("/api/roles", json={"name": 42})

        assert response.status_code == 200
        assert response.json()["data"]["name"] == "42"

    @pytest.mark.asyncio
    async def test_missing_body(self, test_client):
        response = await test_client.post("/api/roles")

        assert response.status_code == 400
        assert response.json()["message"] == "El nombre es requerido."


class TestListRoles:

    @pytest.mark.asyncio
    async def test_empty_list(self, test_client):
        response = await test_client.get("/api/roles")
        assert response.json() == {"success": True, "data": []}


class TestDeleteRole:

    @pytest.mark.asyncio
    async def test_delete_unreferenced_role(self, test_client):
        role = await _create_role(test_client)

        response = await test_client.delete(f"/api/roles/{role['id']}")

        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Rol eliminado exitosamente."}
        assert (await test_client.get("/api/roles")).json()["data"] == []

    @pytest.mark.asyncio
    async def test_delete_referenced_role_is_blocked(self, test_client, sample_user_payload):
        role = await _create_role(test_client)
        await _create_user(test_client, sample_user_payload, role["id"])
        await _create_user(
            test_client, {**sample_user_payload, "email": "b@x.com"}, role["id"]
        )

        response = await test_client.delete(f"/api/roles/{role['id']}")

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert "2 usuario(s) asociado(s)" in body["message"]
        assert role in (await test_client.get("/api/roles")).json()["data"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("raw_id", ["999", "1.5", "1e3", "999.0"])
    async def test_delete_missing_role(self, test_client, raw_id):
        response = await test_client.delete(f"/api/roles/{raw_id}")

        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "El rol no existe."}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("raw_id", ["abc", "uno", "inf"])
    async def test_delete_non_numeric_id(self, test_client, raw_id):
        response = await test_client.delete(f"/api/roles/{raw_id}")

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "message": "ID inválido. Debe ser un número.",
        }

"""
Servicios API — /api/login Endpoint Tests
==========================================
"""

import pytest


class TestLogin:

    @pytest.mark.asyncio
    async def test_correct_credentials(self, test_client, sample_user_payload):
        created = (await test_client.post("/api/users", json=sample_user_payload)).json()["data"]

        response = await test_client.post(
            "/api/login", json={"email": "a@x.com", "password": "pw"}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["user"]["id"] == created["id"]
        assert body["user"]["telefono"] == "3001234567"
        assert "password" not in body["user"]

    @pytest.mark.asyncio
    async def test_wrong_password(self, test_client, sample_user_payload):
        await test_client.post("/api/users", json=sample_user_payload)

        response = await test_client.post(
            "/api/login", json={"email": "a@x.com", "password": "nope"}
        )

        assert response.status_code == 401
        assert response.json() == {"success": False, "message": "Credenciales incorrectas."}

    @pytest.mark.asyncio
    async def test_unknown_email(self, test_client):
        response = await test_client.post(
            "/api/login", json={"email": "ghost@x.com", "password": "pw"}
        )
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_missing_fields(self, test_client):
        response = await test_client.post("/api/login", json={"email": "a@x.com"})

        assert response.status_code == 400
        assert response.json()["message"] == "El correo y la contraseña son obligatorios."

    @pytest.mark.asyncio
    async def test_numeric_password(self, test_client, sample_user_payload):
        await test_client.post("/api/users", json={**sample_user_payload, "password": 1234})

        response = await test_client.post("/api/login", json={"email": "a@x.com", "password": 1234})

        assert response.status_code == 200
        assert response.json()["user"]["email"] == "a@x.com"

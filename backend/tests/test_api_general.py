"""
Servicios API — General Endpoint Tests
=======================================

What we test:
    ✅ GET / welcome text
    ✅ Unknown routes and unsupported methods → 404 envelope
    ✅ Malformed JSON → 400 envelope
    ✅ OpenAPI document and Swagger UI are served
    ✅ Health check and X-Request-ID propagation
"""

import pytest


@pytest.mark.asyncio
async def test_root_returns_welcome_text(test_client):
    response = await test_client.get("/")

    assert response.status_code == 200
    assert response.text == "API de Roles, Usuarios y Productos conectada a MySQL."


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "method, path",
    [("GET", "/api/nada"), ("GET", "/api/roles/1/extra"), ("PUT", "/api/roles")],
)
async def test_unmatched_route(test_client, method, path):
    response = await test_client.request(method, path)

    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Ruta no encontrada"}


@pytest.mark.asyncio
async def test_malformed_json(test_client):
    response = await test_client.post(
        "/api/roles", content=b"{not json", headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Datos inválidos."}


@pytest.mark.asyncio
async def test_openapi_document(test_client):
    response = await test_client.get("/openapi.json")

    assert response.status_code == 200
    document = response.json()
    assert document["info"]["title"] == "API de Roles, Usuarios y Productos"
    assert document["servers"][0]["url"] == "http://localhost:3000"
    for path in ("/api/roles", "/api/roles/{role_id}", "/api/users", "/api/productos", "/api/login"):
        assert path in document["paths"]


@pytest.mark.asyncio
async def test_swagger_ui(test_client):
    response = await test_client.get("/api-docs")

    assert response.status_code == 200
    assert "swagger" in response.text.lower()


@pytest.mark.asyncio
async def test_health(test_client):
    response = await test_client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["database"] == "connected"


@pytest.mark.asyncio
async def test_request_id_is_echoed(test_client):
    response = await test_client.get("/api/roles", headers={"X-Request-ID": "abc12345"})
    assert response.headers["X-Request-ID"] == "abc12345"

    generated = await test_client.get("/api/roles")
    assert len(generated.headers["X-Request-ID"]) == 8

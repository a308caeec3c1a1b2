"""
Servicios API — Base Route
===========================

What:  GET /: plain-text welcome message.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["General"])

WELCOME_TEXT = "API de Roles, Usuarios y Productos conectada a MySQL."


@router.get(
    "/",
    response_class=PlainTextResponse,
    summary="Ruta base de la API",
    responses={200: {"description": "Mensaje de bienvenida"}},
)
async def root() -> str:
    return WELCOME_TEXT

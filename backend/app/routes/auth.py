"""
Servicios API — Login Route Handler
====================================

What:  POST /api/login: looks up a user by email and password.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from app.dependencies import get_auth_service
from app.schemas.common import ErrorResponse
from app.schemas.user import LoginRequest, LoginResponse
from app.services.auth_service import AuthService

router = APIRouter(prefix="/api", tags=["Autenticación"])


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={
        400: {"description": "Datos faltantes", "model": ErrorResponse},
        401: {"description": "Credenciales incorrectas", "model": ErrorResponse},
        500: {"description": "Error del servidor", "model": ErrorResponse},
    },
    summary="Iniciar sesión",
    description="Devuelve el usuario (sin contraseña) cuyo email y contraseña coinciden.",
)
async def login(
    payload: Optional[LoginRequest] = None,
    service: AuthService = Depends(get_auth_service),
) -> LoginResponse:
    return await service.login(payload or LoginRequest())

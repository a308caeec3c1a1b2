"""
Servicios API — User Route Handlers
====================================

What:  POST /api/users, GET /api/users, DELETE /api/users/{user_id}.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from app.dependencies import get_user_service
from app.schemas.common import ErrorResponse, MessageResponse
from app.schemas.user import UserCreate, UserCreatedResponse, UserListResponse
from app.services.user_service import UserService

router = APIRouter(prefix="/api", tags=["Usuarios"])


@router.post(
    "/users",
    response_model=UserCreatedResponse,
    responses={
        400: {"description": "Datos inválidos", "model": ErrorResponse},
        500: {"description": "Error del servidor", "model": ErrorResponse},
    },
    summary="Crear un nuevo usuario",
)
async def create_user(
    payload: Optional[UserCreate] = None,
    service: UserService = Depends(get_user_service),
) -> UserCreatedResponse:
    return await service.create_user(payload or UserCreate())


@router.get(
    "/users",
    response_model=UserListResponse,
    responses={500: {"description": "Error del servidor", "model": ErrorResponse}},
    summary="Obtener todos los usuarios",
)
async def list_users(service: UserService = Depends(get_user_service)) -> UserListResponse:
    return await service.list_users()


@router.delete(
    "/users/{user_id}",
    response_model=MessageResponse,
    responses={
        400: {"description": "ID inválido", "model": ErrorResponse},
        404: {"description": "Usuario no encontrado", "model": ErrorResponse},
        500: {"description": "Error del servidor", "model": ErrorResponse},
    },
    summary="Eliminar un usuario",
)
async def delete_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> MessageResponse:
    return await service.delete_user(user_id)

"""
Servicios API — Role Route Handlers
====================================

What:  POST /api/roles, GET /api/roles, DELETE /api/roles/{role_id}.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from app.dependencies import get_role_service
from app.schemas.common import ErrorResponse, MessageResponse
from app.schemas.role import RoleCreate, RoleListResponse, RoleResponse
from app.services.role_service import RoleService

router = APIRouter(prefix="/api", tags=["Roles"])


@router.post(
    "/roles",
    response_model=RoleResponse,
    responses={
        400: {"description": "Datos inválidos", "model": ErrorResponse},
        500: {"description": "Error del servidor", "model": ErrorResponse},
    },
    summary="Crear un nuevo rol",
)
async def create_role(
    payload: Optional[RoleCreate] = None,
    service: RoleService = Depends(get_role_service),
) -> RoleResponse:
    # A request without a body is treated like an empty object
    return await service.create_role(payload or RoleCreate())


@router.get(
    "/roles",
    response_model=RoleListResponse,
    responses={500: {"description": "Error del servidor", "model": ErrorResponse}},
    summary="Obtener todos los roles",
)
async def list_roles(service: RoleService = Depends(get_role_service)) -> RoleListResponse:
    return await service.list_roles()


@router.delete(
    "/roles/{role_id}",
    response_model=MessageResponse,
    responses={
        400: {"description": "ID inválido o rol tiene usuarios asociados", "model": ErrorResponse},
        404: {"description": "Rol no encontrado", "model": ErrorResponse},
        500: {"description": "Error del servidor", "model": ErrorResponse},
    },
    summary="Eliminar un rol",
    description="Elimina el rol solo si ningún usuario lo tiene asignado.",
)
async def delete_role(
    role_id: str,
    service: RoleService = Depends(get_role_service),
) -> MessageResponse:
    return await service.delete_role(role_id)

"""
Servicios API — Product Route Handlers
=======================================

What:  POST /api/productos, GET /api/productos, DELETE /api/productos/{product_id}.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from app.dependencies import get_product_service
from app.schemas.common import ErrorResponse, MessageResponse
from app.schemas.product import ProductCreate, ProductListResponse, ProductResponse
from app.services.product_service import ProductService

router = APIRouter(prefix="/api", tags=["Productos"])


@router.post(
    "/productos",
    response_model=ProductResponse,
    responses={
        400: {"description": "Datos inválidos", "model": ErrorResponse},
        500: {"description": "Error del servidor", "model": ErrorResponse},
    },
    summary="Crear un nuevo producto",
)
async def create_product(
    payload: Optional[ProductCreate] = None,
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    return await service.create_product(payload or ProductCreate())


@router.get(
    "/productos",
    response_model=ProductListResponse,
    responses={500: {"description": "Error del servidor", "model": ErrorResponse}},
    summary="Obtener todos los productos",
)
async def list_products(
    service: ProductService = Depends(get_product_service),
) -> ProductListResponse:
    return await service.list_products()


@router.delete(
    "/productos/{product_id}",
    response_model=MessageResponse,
    responses={
        400: {"description": "ID inválido", "model": ErrorResponse},
        404: {"description": "Producto no encontrado", "model": ErrorResponse},
        500: {"description": "Error del servidor", "model": ErrorResponse},
    },
    summary="Eliminar un producto",
)
async def delete_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> MessageResponse:
    return await service.delete_product(product_id)

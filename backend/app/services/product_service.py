"""
Servicios API — Product Service
================================

What:  Create, list and delete products.

The three price fields must be present and non-null; 0 is a valid price.
"""

import logging

from sqlalchemy import delete, insert, select

from app.database import StorageGateway
from app.exceptions import DatabaseError, NotFoundError, StorageError, ValidationError
from app.models.product import Product
from app.schemas.common import MessageResponse
from app.schemas.product import (
    ProductCreate,
    ProductListResponse,
    ProductOut,
    ProductResponse,
)
from app.services import parse_id

logger = logging.getLogger(__name__)

PRICE_FIELDS = ("precio_compra", "precio_venta", "iva")


class ProductService:

    def __init__(self, gateway: StorageGateway):
        self.gateway = gateway

    async def create_product(self, payload: ProductCreate) -> ProductResponse:
        """
        Insert a product and echo every submitted field plus the new id.

        Raises:
            ValidationError: name empty/missing or a price field is null/missing
            DatabaseError:   insert failed ("Error al crear producto.")
        """
        if not payload.name or any(getattr(payload, f) is None for f in PRICE_FIELDS):
            raise ValidationError(
                message="Los campos obligatorios son: name, precio_compra, precio_venta e iva."
            )

        values = payload.model_dump()
        try:
            result = await self.gateway.execute(insert(Product).values(**values))
        except StorageError as e:
            logger.error("Database error creating product: %s | %s", e.message, e.context)
            raise DatabaseError(message="Error al crear producto.", context=e.context) from e

        logger.info("Product created: id=%s", result.last_insert_id)
        return ProductResponse(data=ProductOut(id=result.last_insert_id, **values))

    async def list_products(self) -> ProductListResponse:
        try:
            result = await self.gateway.execute(select(Product))
        except StorageError as e:
            logger.error("Database error listing products: %s | %s", e.message, e.context)
            raise DatabaseError(message="Error al obtener productos.", context=e.context) from e

        return ProductListResponse(data=result.rows)

    async def delete_product(self, raw_id: str) -> MessageResponse:
        product_id = parse_id(raw_id, "El producto no existe.", "product")

        try:
            found = await self.gateway.execute(
                select(Product.id, Product.name).where(Product.id == product_id)
            )
            product = found.first()
            if product is None:
                raise NotFoundError(
                    message="El producto no existe.", resource="product", resource_id=product_id
                )

            deleted = await self.gateway.execute(delete(Product).where(Product.id == product_id))
        except StorageError as e:
            logger.error(
                "Database error deleting product %s: %s | %s", product_id, e.message, e.context
            )
            raise DatabaseError(message="Error al eliminar el producto.", context=e.context) from e

        if deleted.affected_rows == 0:
            raise NotFoundError(
                message="No se pudo eliminar el producto.",
                resource="product",
                resource_id=product_id,
            )

        logger.info("Product deleted: id=%s", product_id)
        return MessageResponse(message=f'Producto "{product["name"]}" eliminado exitosamente.')

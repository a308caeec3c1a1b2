"""
Servicios API — Role Service
=============================

What:  Create, list and delete roles.
Who:   Called by the /api/roles route handlers.

Deletion Flow (DELETE /api/roles/{id}):
    One transaction, on one connection:
    1. SELECT ... FOR UPDATE the role       → 404 if absent
    2. COUNT users referencing the role     → 400 if any
    3. DELETE the role                      → 404 if nothing was deleted

    The row lock keeps a concurrent delete of the same role out of the window
    between the checks and the delete. A user inserted concurrently with a
    reference to the role is caught by the foreign key, which rejects step 3;
    that is reported as the same 400 conflict.
"""

import logging

from sqlalchemy import delete, func, insert, select

from app.database import StorageGateway
from app.exceptions import (
    ConflictError,
    ConstraintViolation,
    DatabaseError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from app.models.role import Role
from app.models.user import User
from app.schemas.common import MessageResponse
from app.schemas.role import RoleCreate, RoleListResponse, RoleOut, RoleResponse
from app.services import parse_id

logger = logging.getLogger(__name__)


class RoleService:
    """Business logic for roles. Stateless apart from the injected gateway."""

    def __init__(self, gateway: StorageGateway):
        self.gateway = gateway

    async def create_role(self, payload: RoleCreate) -> RoleResponse:
        """
        Insert a role and echo it back with its generated id.

        Raises:
            ValidationError: name missing or empty
            DatabaseError:   insert failed ("Error al crear rol.")
        """
        if not payload.name:
            raise ValidationError(message="El nombre es requerido.", field="name")

        try:
            result = await self.gateway.execute(insert(Role).values(name=payload.name))
        except StorageError as e:
            logger.error("Database error creating role: %s | %s", e.message, e.context)
            raise DatabaseError(message="Error al crear rol.", context=e.context) from e

        logger.info("Role created: id=%s", result.last_insert_id)
        return RoleResponse(data=RoleOut(id=result.last_insert_id, name=payload.name))

    async def list_roles(self) -> RoleListResponse:
        try:
            result = await self.gateway.execute(select(Role))
        except StorageError as e:
            logger.error("Database error listing roles: %s | %s", e.message, e.context)
            raise DatabaseError(message="Error al obtener roles.", context=e.context) from e

        return RoleListResponse(data=result.rows)

    async def delete_role(self, raw_id: str) -> MessageResponse:
        """
        Delete a role that no user references.

        Raises:
            ValidationError: id is not a number
            NotFoundError:   role does not exist
            ConflictError:   users still reference the role
            DatabaseError:   any other storage failure ("Error al eliminar el rol.")
        """
        role_id = parse_id(raw_id, "El rol no existe.", "role")

        try:
            async with self.gateway.transaction() as tx:
                found = await tx.execute(
                    select(Role.id).where(Role.id == role_id).with_for_update()
                )
                if not found.rows:
                    raise NotFoundError(
                        message="El rol no existe.", resource="role", resource_id=role_id
                    )

                counted = await tx.execute(
                    select(func.count().label("count"))
                    .select_from(User)
                    .where(User.role_id == role_id)
                )
                user_count = counted.rows[0]["count"]
                if user_count > 0:
                    raise ConflictError(
                        message=(
                            f"No se puede eliminar el rol porque tiene {user_count} "
                            "usuario(s) asociado(s). Primero cambie o elimine los "
                            "usuarios asociados."
                        ),
                        context={"role_id": role_id, "user_count": user_count},
                    )

                deleted = await tx.execute(delete(Role).where(Role.id == role_id))
                if deleted.affected_rows == 0:
                    raise NotFoundError(
                        message="No se pudo eliminar el rol.",
                        resource="role",
                        resource_id=role_id,
                    )
        except ConstraintViolation as e:
            # A user referencing the role was committed after our count
            raise ConflictError(
                message=(
                    "No se puede eliminar el rol porque tiene usuario(s) asociado(s). "
                    "Primero cambie o elimine los usuarios asociados."
                ),
                context={"role_id": role_id, **e.context},
            ) from e
        except StorageError as e:
            logger.error("Database error deleting role %s: %s | %s", role_id, e.message, e.context)
            raise DatabaseError(message="Error al eliminar el rol.", context=e.context) from e

        logger.info("Role deleted: id=%s", role_id)
        return MessageResponse(message="Rol eliminado exitosamente.")

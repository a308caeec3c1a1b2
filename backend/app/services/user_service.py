"""
Servicios API — User Service
=============================

What:  Create, list and delete users.
Who:   Called by the /api/users route handlers.

Responses never include more than the stored row: the list endpoint returns
rows as stored, while creation echoes only id, identificacion, nombres,
apellidos and email.
"""

import logging

from sqlalchemy import delete, insert, select

from app.database import StorageGateway
from app.exceptions import DatabaseError, NotFoundError, StorageError, ValidationError
from app.models.user import User
from app.schemas.common import MessageResponse
from app.schemas.user import (
    UserCreate,
    UserCreated,
    UserCreatedResponse,
    UserListResponse,
)
from app.services import parse_id

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("identificacion", "nombres", "apellidos", "email", "password")


class UserService:

    def __init__(self, gateway: StorageGateway):
        self.gateway = gateway

    async def create_user(self, payload: UserCreate) -> UserCreatedResponse:
        """
        Insert a user with all eleven columns (missing optional ones as NULL).

        Raises:
            ValidationError: a required field is missing or empty
            DatabaseError:   insert failed, including an unknown role_id
        """
        missing = [name for name in REQUIRED_FIELDS if not getattr(payload, name)]
        if missing:
            raise ValidationError(
                message=(
                    "Los campos obligatorios son: identificacion, nombres, "
                    "apellidos, email y password."
                ),
                context={"missing": missing},
            )

        try:
            result = await self.gateway.execute(insert(User).values(**payload.model_dump()))
        except StorageError as e:
            logger.error("Database error creating user: %s | %s", e.message, e.context)
            raise DatabaseError(message="Error al crear usuario.", context=e.context) from e

        logger.info("User created: id=%s", result.last_insert_id)
        return UserCreatedResponse(
            data=UserCreated(
                id=result.last_insert_id,
                identificacion=payload.identificacion,
                nombres=payload.nombres,
                apellidos=payload.apellidos,
                email=payload.email,
            )
        )

    async def list_users(self) -> UserListResponse:
        try:
            result = await self.gateway.execute(select(User))
        except StorageError as e:
            logger.error("Database error listing users: %s | %s", e.message, e.context)
            raise DatabaseError(message="Error al obtener usuarios.", context=e.context) from e

        return UserListResponse(data=result.rows)

    async def delete_user(self, raw_id: str) -> MessageResponse:
        """
        Delete a user by id; the response names the deleted user.

        Raises:
            ValidationError: id is not a number
            NotFoundError:   user does not exist
            DatabaseError:   storage failure ("Error al eliminar el usuario.")
        """
        user_id = parse_id(raw_id, "El usuario no existe.", "user")

        try:
            found = await self.gateway.execute(
                select(User.id, User.nombres, User.apellidos).where(User.id == user_id)
            )
            user = found.first()
            if user is None:
                raise NotFoundError(
                    message="El usuario no existe.", resource="user", resource_id=user_id
                )

            deleted = await self.gateway.execute(delete(User).where(User.id == user_id))
        except StorageError as e:
            logger.error("Database error deleting user %s: %s | %s", user_id, e.message, e.context)
            raise DatabaseError(message="Error al eliminar el usuario.", context=e.context) from e

        if deleted.affected_rows == 0:
            raise NotFoundError(
                message="No se pudo eliminar el usuario.", resource="user", resource_id=user_id
            )

        logger.info("User deleted: id=%s", user_id)
        return MessageResponse(
            message=f"Usuario {user['nombres']} {user['apellidos']} eliminado exitosamente."
        )

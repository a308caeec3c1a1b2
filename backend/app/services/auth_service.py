"""
Servicios API — Auth Service
=============================

What:  Email + password lookup for POST /api/login.
How:   Single SELECT comparing both columns by equality. Passwords are stored
       and compared as plain text; no hashing, no tokens, no sessions.
       When several rows match, the one with the lowest id is returned.
"""

import logging

from sqlalchemy import select

from app.database import StorageGateway
from app.exceptions import AuthError, DatabaseError, StorageError, ValidationError
from app.models.user import User
from app.schemas.user import LoginRequest, LoginResponse, UserPublic

logger = logging.getLogger(__name__)


class AuthService:

    def __init__(self, gateway: StorageGateway):
        self.gateway = gateway

    async def login(self, payload: LoginRequest) -> LoginResponse:
        """
        Return the matching user without its password.

        Raises:
            ValidationError: email or password missing
            AuthError:       no user matches both values
            DatabaseError:   lookup failed ("Error en el servidor.")
        """
        if not payload.email or not payload.password:
            raise ValidationError(message="El correo y la contraseña son obligatorios.")

        try:
            result = await self.gateway.execute(
                select(User)
                .where(User.email == payload.email, User.password == payload.password)
                .order_by(User.id)
                .limit(1)
            )
        except StorageError as e:
            logger.error("Database error during login: %s | %s", e.message, e.context)
            raise DatabaseError(message="Error en el servidor.", context=e.context) from e

        row = result.first()
        if row is None:
            logger.info("Login rejected")
            raise AuthError(message="Credenciales incorrectas.")

        row.pop("password", None)
        logger.info("Login accepted: user id=%s", row["id"])
        return LoginResponse(user=UserPublic(**row))

"""
Servicios API — User SQLAlchemy Model
======================================

What:  ORM model representing the `users` table.
Who:   Used by UserService, AuthService and RoleService (reference counting).

Column notes:
    - password is stored as received (plain text). Login compares it by
      equality in SQL. Kept for compatibility with existing rows.
    - sexo / estatus are native ENUM columns on MySQL.
    - role_id is nullable; when set it must reference roles.id. The foreign
      key has no ON DELETE action, so the database refuses to delete a role
      that still has users.
"""

from typing import Optional

from sqlalchemy import Enum, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base

SEXO_VALUES = ("M", "F")
ESTATUS_VALUES = ("activo", "inactivo")


class User(Base):
    """An application user, optionally assigned to a role."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    identificacion: Mapped[str] = mapped_column(String(50), nullable=False)
    nombres: Mapped[str] = mapped_column(String(100), nullable=False)
    apellidos: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(100), nullable=False)
    telefono: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    direccion: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    password: Mapped[str] = mapped_column(String(100), nullable=False)
    sexo: Mapped[Optional[str]] = mapped_column(
        Enum(*SEXO_VALUES, name="sexo"), nullable=True
    )
    edad: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    estatus: Mapped[Optional[str]] = mapped_column(
        Enum(*ESTATUS_VALUES, name="estatus"), nullable=True
    )
    role_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("roles.id"), nullable=True
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}', role_id={self.role_id})>"

"""
Servicios API — Role SQLAlchemy Model
======================================

What:  ORM model representing the `roles` table.
Who:   Used by RoleService for its statements and by the schema initializer.

A role is referenced by users.role_id; the foreign key lives on the User model.
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Role(Base):
    """A named role that users may be assigned to."""

    __tablename__ = "roles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)

    def __repr__(self) -> str:
        return f"<Role(id={self.id}, name='{self.name}')>"

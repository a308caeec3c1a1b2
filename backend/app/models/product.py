"""
Servicios API — Product SQLAlchemy Model
=========================================

What:  ORM model representing the `productos` table.

The price columns are nullable at the database level; the API requires them
on creation (see ProductService.create_product).
"""

from decimal import Decimal
from typing import Optional

from sqlalchemy import Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Product(Base):
    __tablename__ = "productos"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    categoria: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    precio_compra: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2), nullable=True)
    precio_venta: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2), nullable=True)
    iva: Mapped[Optional[Decimal]] = mapped_column(Numeric(5, 2), nullable=True)
    imagen_url: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    def __repr__(self) -> str:
        return f"<Product(id={self.id}, name='{self.name}')>"

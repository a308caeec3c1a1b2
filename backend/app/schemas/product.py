"""
Servicios API — Product Schemas
================================

Prices are plain numbers in JSON. DECIMAL values read from the database are
converted to float on the way out.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class ProductCreate(BaseModel):
    name: Optional[str] = Field(default=None, description="Nombre del producto")
    categoria: Optional[str] = Field(default=None, description="Categoría del producto")
    precio_compra: Optional[float] = Field(default=None, description="Precio de compra")
    precio_venta: Optional[float] = Field(default=None, description="Precio de venta")
    iva: Optional[float] = Field(default=None, description="Porcentaje de IVA")
    imagen_url: Optional[str] = Field(default=None, description="URL de la imagen del producto")

    model_config = {
        "coerce_numbers_to_str": True,
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Martillo",
                    "categoria": "Herramientas",
                    "precio_compra": 8.5,
                    "precio_venta": 12.0,
                    "iva": 19,
                    "imagen_url": "https://example.com/martillo.png",
                }
            ]
        }
    }


class ProductOut(BaseModel):
    id: int = Field(description="ID único del producto")
    name: str
    categoria: Optional[str] = None
    precio_compra: Optional[float] = None
    precio_venta: Optional[float] = None
    iva: Optional[float] = None
    imagen_url: Optional[str] = None


class ProductResponse(BaseModel):
    success: bool = True
    data: ProductOut


class ProductListResponse(BaseModel):
    success: bool = True
    data: List[ProductOut]

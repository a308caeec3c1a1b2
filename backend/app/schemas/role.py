"""
Servicios API — Role Schemas
=============================

Request fields are optional at the schema level so that a missing `name`
reaches RoleService and produces the API's own 400 message instead of a
framework validation error.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class RoleCreate(BaseModel):
    name: Optional[str] = Field(default=None, description="Nombre del rol", examples=["Administrador"])

    model_config = {"coerce_numbers_to_str": True}


class RoleOut(BaseModel):
    id: int = Field(description="ID único del rol")
    name: str = Field(description="Nombre del rol")

    model_config = {"from_attributes": True}


class RoleResponse(BaseModel):
    success: bool = True
    data: RoleOut


class RoleListResponse(BaseModel):
    success: bool = True
    data: List[RoleOut]

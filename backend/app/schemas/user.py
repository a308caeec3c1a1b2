"""
Servicios API — User Schemas
=============================

What:  Request/response contracts for /api/users and /api/login.

Three user shapes are exposed:
    UserCreated: the subset echoed after creation (no password, no optional fields)
    UserPublic:  a full row minus the password (login response)
    UserRecord:  a full row as stored (list endpoint returns rows verbatim)
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

Sexo = Literal["M", "F"]
Estatus = Literal["activo", "inactivo"]


class UserCreate(BaseModel):
    """
    Body of POST /api/users.

    identificacion, nombres, apellidos, email and password are required;
    presence is checked by UserService so the error message stays uniform.
    Numbers sent for text columns (identificacion: 123) are stored as text.
    """
    identificacion: Optional[str] = Field(default=None, description="Número de identificación")
    nombres: Optional[str] = Field(default=None, description="Nombres del usuario")
    apellidos: Optional[str] = Field(default=None, description="Apellidos del usuario")
    email: Optional[str] = Field(default=None, description="Email del usuario")
    telefono: Optional[str] = Field(default=None, description="Teléfono del usuario")
    direccion: Optional[str] = Field(default=None, description="Dirección del usuario")
    password: Optional[str] = Field(default=None, description="Contraseña del usuario")
    sexo: Optional[Sexo] = Field(default=None, description="Sexo del usuario")
    edad: Optional[int] = Field(default=None, description="Edad del usuario")
    estatus: Optional[Estatus] = Field(default=None, description="Estado del usuario")
    role_id: Optional[int] = Field(default=None, description="ID del rol asignado")

    model_config = {
        "coerce_numbers_to_str": True,
        "json_schema_extra": {
            "examples": [
                {
                    "identificacion": "123",
                    "nombres": "Ana",
                    "apellidos": "Lopez",
                    "email": "a@x.com",
                    "password": "pw",
                    "role_id": 1,
                }
            ]
        }
    }


class LoginRequest(BaseModel):
    email: Optional[str] = Field(default=None, examples=["usuario@ejemplo.com"])
    password: Optional[str] = Field(default=None, examples=["123456"])

    model_config = {"coerce_numbers_to_str": True}


class UserCreated(BaseModel):
    id: int
    identificacion: str
    nombres: str
    apellidos: str
    email: str


class UserPublic(BaseModel):
    id: int
    identificacion: str
    nombres: str
    apellidos: str
    email: str
    telefono: Optional[str] = None
    direccion: Optional[str] = None
    sexo: Optional[str] = None
    edad: Optional[int] = None
    estatus: Optional[str] = None
    role_id: Optional[int] = None


class UserRecord(UserPublic):
    password: str


class UserCreatedResponse(BaseModel):
    success: bool = True
    data: UserCreated


class UserListResponse(BaseModel):
    success: bool = True
    data: List[UserRecord]


class LoginResponse(BaseModel):
    success: bool = True
    user: UserPublic

# Services package init
"""
Servicios API — Services Layer
===============================

What:  Request validation and SQL for each resource, between routes and the gateway.
How:   Each service is constructed with a StorageGateway (injected by
       FastAPI dependencies, see app/dependencies.py) and returns the
       response envelope as a Pydantic model.

Service Inventory:
    - RoleService:    create / list / delete roles (delete guarded by users)
    - UserService:    create / list / delete users
    - ProductService: create / list / delete products
    - AuthService:    email + password lookup

Error contract shared by all services:
    - Missing input            → ValidationError (400)
    - Unknown id               → NotFoundError (404)
    - Gateway failure          → DatabaseError with "Error al <acción>." (500)
"""

import math

from app.exceptions import NotFoundError, ValidationError

INVALID_ID_MESSAGE = "ID inválido. Debe ser un número."


def parse_id(raw_id: str, not_found_message: str, resource: str) -> int:
    """
    Convert a path parameter into an integer id.

    Any finite number is accepted as an id ("7", " 7 ", "1e3", "999.0").
    A number with a fractional part can never match a row, so it is reported
    as the entity's 404 rather than as malformed input.

    Raises:
        ValidationError: empty, non-numeric or non-finite values ("abc", "", "inf")
        NotFoundError:   finite non-integral values ("1.5")
    """
    text = str(raw_id).strip()
    try:
        return int(text)
    except ValueError:
        pass

    try:
        value = float(text)
    except ValueError:
        raise ValidationError(message=INVALID_ID_MESSAGE, field="id")

    if not math.isfinite(value):
        raise ValidationError(message=INVALID_ID_MESSAGE, field="id")
    if not value.is_integer():
        raise NotFoundError(message=not_found_message, resource=resource, resource_id=text)
    return int(value)

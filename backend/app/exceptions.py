"""
Servicios API — Custom Exception Hierarchy
===========================================

What:  Application-specific exceptions for every failure the API can report.
How:   Each exception carries a user-facing message and an optional context dict.
       Global exception handlers (registered in main.py) translate them into the
       `{success: false, message}` envelope with the matching HTTP status code.
Who:   Raised by the storage gateway and the services; caught by global handlers.

Exception Hierarchy:
    ServiciosAPIError (base)
    ├── ValidationError          → 400 Bad Request (missing/invalid input)
    ├── ConflictError            → 400 Bad Request (role still referenced by users)
    ├── AuthError                → 401 Unauthorized (credential mismatch)
    ├── NotFoundError            → 404 Not Found
    ├── DatabaseError            → 500 Internal Server Error ("Error al <acción>.")
    └── StorageError             → 500 Internal Server Error (raised by the gateway)
        ├── StorageConnectionError   (pool could not produce a connection)
        └── QueryError               (statement failed)
            └── ConstraintViolation  (integrity constraint rejected the statement)

    Services catch StorageError and re-raise it as DatabaseError carrying the
    action-specific message, so gateway details never reach the client.
"""

from typing import Any, Dict, Optional


class ServiciosAPIError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (returned in the envelope)
        context:  Additional debug info (logged but NOT returned to client)
    """

    status_code: int = 500

    def __init__(
        self,
        message: str = "Error en el servidor.",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(ServiciosAPIError):
    """
    Raised when client input fails presence or format checks.

    When:    Missing required body fields, non-numeric path ids.
    HTTP:    400 Bad Request
    """

    status_code = 400

    def __init__(
        self,
        message: str = "Datos inválidos.",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class ConflictError(ServiciosAPIError):
    """
    Raised when a delete would break referential integrity.

    When:    DELETE /api/roles/{id} while users still reference the role.
    HTTP:    400 Bad Request (kept at 400 for client compatibility)
    """

    status_code = 400

    def __init__(
        self,
        message: str = "El recurso tiene registros asociados.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class AuthError(ServiciosAPIError):
    """
    Raised when login credentials do not match any user.

    HTTP:    401 Unauthorized
    """

    status_code = 401

    def __init__(
        self,
        message: str = "Credenciales incorrectas.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(ServiciosAPIError):
    """
    Raised when a requested row does not exist.

    When:    DELETE with an id that is not in the table.
    HTTP:    404 Not Found

    The database returns an empty result for missing rows (not an exception);
    services convert that into this exception.
    """

    status_code = 404

    def __init__(
        self,
        message: str = "El recurso no existe.",
        resource: Optional[str] = None,
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if resource:
            ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(ServiciosAPIError):
    """
    Raised by services when a storage operation fails.

    HTTP:    500 Internal Server Error

    Security Note:
        The message is always the generic per-action text ("Error al crear rol.").
        The underlying driver error is kept in `context` and logged server-side only.
    """

    status_code = 500

    def __init__(
        self,
        message: str = "Error en el servidor.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class StorageError(ServiciosAPIError):
    """Base for failures raised by the storage gateway."""

    status_code = 500

    def __init__(
        self,
        message: str = "Storage operation failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class StorageConnectionError(StorageError):
    """The connection pool could not produce a connection."""

    def __init__(
        self,
        message: str = "Could not obtain a database connection",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class QueryError(StorageError):
    """A statement failed: malformed SQL, type mismatch, constraint violation."""

    def __init__(
        self,
        message: str = "Query execution failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class ConstraintViolation(QueryError):
    """An integrity constraint (foreign key, NOT NULL) rejected the statement."""

    def __init__(
        self,
        message: str = "Integrity constraint violated",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)

"""
Servicios API — Schema Initializer
===================================

What:  Ensures the roles, users and productos tables exist.
How:   Issues CREATE TABLE only for missing tables (checkfirst), one table at a
       time in dependency order: roles, then users (references roles), then
       productos.
When:  Once during application startup, before the first request is served.

Failure policy:
    A failure is logged and reported through the return value; it does not
    stop the server. Requests that need the missing tables fail with 500
    until the database is fixed and the service restarted.
"""

import logging

from app.database import StorageGateway
from app.models.product import Product
from app.models.role import Role
from app.models.user import User

logger = logging.getLogger(__name__)

# Creation order matters: users.role_id references roles.id
TABLES = (Role.__table__, User.__table__, Product.__table__)


async def init_schema(gateway: StorageGateway) -> bool:
    """
    Create any missing table. Safe to run on every start.

    Returns:
        True when all tables are ready, False when creation failed (logged).
    """
    try:
        async with gateway.engine.begin() as conn:
            for table in TABLES:
                await conn.run_sync(table.create, checkfirst=True)
    except Exception as e:
        logger.error("Error creando tablas: %s", str(e), exc_info=True)
        return False

    logger.info("Tablas listas: %s", ", ".join(table.name for table in TABLES))
    return True

# Middleware package init
"""
Servicios API — Middleware Package
===================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    1. Request ID: Generate correlation ID for logging and tracing
    2. Logging: Log request details with the generated request ID
    3. CORS: Applied by Starlette's CORSMiddleware (handles preflight)

    JSON body parsing is done by FastAPI itself from the Pydantic body models.
"""

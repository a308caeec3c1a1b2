"""
Servicios API — Application Package Initializer
================================================

What: Marks the `app` directory as a Python package.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    The backend is layered the same way for every resource:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │      Services (Validation + SQL)    │  ← Presence checks, envelopes
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy tables + Pydantic
    ├─────────────────────────────────────┤
    │     Storage Gateway (Persistence)   │  ← Async SQLAlchemy engine/pool
    └─────────────────────────────────────┘

    Routes never touch the database directly; services receive the gateway
    through FastAPI dependencies and issue their statements through it.
"""

__version__ = "1.0.0"

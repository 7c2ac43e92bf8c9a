"""
Rollcall Backend — Application Package Initializer
==================================================

What: Marks the `rollcall` directory as a Python package.
Who:  Imported by uvicorn (`uvicorn rollcall.main:app`), Alembic and pytest.

Architecture Note:
    The backend is split into four layers:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← status codes, headers
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← existence and email checks
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Routes never touch the ORM directly; services never build HTTP responses.
"""

__version__ = "1.0.0"

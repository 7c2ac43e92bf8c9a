"""
Rollcall Backend — Test Configuration (conftest.py)
===================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures:
    ├── mock_db_session: AsyncMock session (no database)
    ├── db_engine:       async engine on a fresh SQLite file with the schema created
    ├── db_session:      AsyncSession bound to db_engine
    ├── app:             fresh FastAPI app whose sessions come from db_engine
    ├── test_client:     HTTPX AsyncClient over ASGITransport for `app`
    └── student1..3:     StudentResponse records used across suites
"""

import os
import tempfile

# Settings are read at import time; set the environment before importing rollcall
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///" + os.path.join(
    tempfile.mkdtemp(prefix="rollcall_test_"), "test.db"
)
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["RATE_LIMIT_ENABLED"] = "false"

from datetime import date
from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from rollcall.database import Base, get_db_session
from rollcall.main import create_app
from rollcall.models.student import years_between
from rollcall.schemas.student import StudentResponse


# ══════════════════════════════════════════════════════════════════════════
# Sample Data
# ══════════════════════════════════════════════════════════════════════════

def make_student(student_id: int, name: str, email: str, dob: str) -> StudentResponse:
    born = date.fromisoformat(dob)
    return StudentResponse(id=student_id, name=name, email=email, dob=born, age=years_between(born))


@pytest.fixture
def student1() -> StudentResponse:
    return make_student(1, "name1", "email1@gmail.com", "2001-01-01")


@pytest.fixture
def student2() -> StudentResponse:
    return make_student(2, "name2", "email2@gmail.com", "2002-02-02")


@pytest.fixture
def student3() -> StudentResponse:
    return make_student(3, "name3", "email3@gmail.com", "2003-03-03")


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    A mock async database session for service tests that need to force
    SQLAlchemy failures.
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.get = AsyncMock()
    session.flush = AsyncMock()
    session.delete = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest_asyncio.fixture
async def db_engine(tmp_path):
    """Async engine on a per-test SQLite file with all tables created."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'rollcall.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


# ══════════════════════════════════════════════════════════════════════════
# HTTP Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def app(db_engine):
    """
    A fresh application whose get_db_session dependency is backed by db_engine.

    The override commits and rolls back exactly like the real dependency, so
    writes from one request are visible to the next.
    """
    application = create_app()
    factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    application.dependency_overrides[get_db_session] = override_get_db_session
    return application


@pytest_asyncio.fixture
async def test_client(app):
    """
    HTTPX AsyncClient talking to `app` in-process.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

import os

# Settings are read at import time: point the app at SQLite before importing it
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret")

import pytest
from uuid import uuid4
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool
from app.main import app
from app.config import settings
from app.db.base import Base
from app.db.postgres import get_db, seed_departments
from app.auth.models import JWTPayload


@pytest.fixture(scope="function")
async def db_session():
    """Fresh in-memory database with the departments seeded, per test."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
        echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        await seed_departments(session, settings.departments)
        yield session

    await engine.dispose()


@pytest.fixture(scope="function")
async def client(db_session):
    """Create a test client with overridden dependencies."""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def mock_jwt_payload():
    """An employee of the IT department."""
    return JWTPayload(
        user_id=uuid4(),
        email="employee@example.com",
        name="Test Employee",
        department="IT",
        is_admin=False,
        roles=["user"],
        permissions=["feedback:create"],
    )


@pytest.fixture
def admin_jwt_payload():
    """An administrator of the HR department."""
    return JWTPayload(
        user_id=uuid4(),
        email="admin@example.com",
        name="Test Admin",
        department="HR",
        is_admin=True,
        roles=["admin"],
        permissions=["feedback:create", "feedback:read", "period:manage", "template:manage"],
    )


@pytest.fixture
def auth_headers():
    """Authorization header for requests whose token check is overridden."""
    return {"Authorization": "Bearer mock_token"}

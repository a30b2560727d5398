"""Database Configuration"""
import logging
from typing import AsyncGenerator, Iterable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from app.config import settings
from app.db.base import Base

logger = logging.getLogger(__name__)

# Create async engine
engine = create_async_engine(
    settings.database_url,
    echo=settings.db_echo,
    poolclass=NullPool,
)

# Create async session factory
async_session = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependency to get database session."""
    async with async_session() as session:
        try:
            yield session
        finally:
            await session.close()


async def seed_departments(session: AsyncSession, departments: Iterable[str]) -> int:
    """Insert any configured department that is not stored yet. Returns the number added."""
    from app.db.models import Department

    result = await session.execute(select(Department.name))
    existing = set(result.scalars().all())
    added = 0
    for name in departments:
        if name not in existing:
            session.add(Department(name=name, description=f"{name} department"))
            added += 1
    await session.commit()
    return added


async def init_db() -> None:
    """Create tables and seed the reference department list."""
    # Register every model on Base.metadata before create_all
    import app.db.models  # noqa: F401
    import app.feedback.models  # noqa: F401
    import app.periods.models  # noqa: F401
    import app.question_templates.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as session:
        added = await seed_departments(session, settings.departments)
    logger.info(f"Database ready, {added} department(s) seeded")

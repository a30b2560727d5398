"""
Database Setup Entry Point
Creates tables, seeds the configured departments and, when ADMIN_EMAIL and
ADMIN_PASSWORD are set, makes sure that administrator account exists
"""
import asyncio
import logging
import os

from app.config import settings, setup_logging
from app.db.postgres import async_session, init_db
from app.auth.repository import UserRepository
from app.auth.passwords import hash_password
from app.db.models import User

logger = logging.getLogger("seed_db")


async def ensure_admin(email: str, password: str, name: str, department: str) -> None:
    async with async_session() as session:
        repository = UserRepository(session)
        user = await repository.get_by_email(email)
        if user:
            if not user.is_admin:
                user.is_admin = True
                await session.commit()
                logger.info(f"Promoted {email} to admin")
            return
        await repository.create(User(
            email=email.lower(),
            password=hash_password(password),
            name=name,
            department=department,
            is_admin=True,
        ))
        logger.info(f"Created admin {email}")


async def main() -> None:
    await init_db()
    email = os.getenv("ADMIN_EMAIL")
    password = os.getenv("ADMIN_PASSWORD")
    if email and password:
        await ensure_admin(
            email,
            password,
            os.getenv("ADMIN_NAME", "Administrator"),
            os.getenv("ADMIN_DEPARTMENT", settings.departments[0]),
        )


if __name__ == "__main__":
    setup_logging(settings.log_level)
    asyncio.run(main())

"""User repository for database operations"""
from uuid import UUID
from typing import Optional
from sqlalchemy import select
from app.db.models import User
from app.db.repository import BaseRepository


class UserRepository(BaseRepository):
    """Repository for user accounts"""

    async def create(self, user: User) -> User:
        """Create a new user"""
        self.db.add(user)
        await self._commit()
        await self.db.refresh(user)
        return user

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        stmt = select(User).where(User.id == user_id)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email (case-insensitive)"""
        stmt = select(User).where(User.email == email.lower())
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

"""Feedback repository for database operations"""
from uuid import UUID
from typing import List, Optional
from sqlalchemy import select, and_
from app.db.repository import BaseRepository
from app.feedback.models import Feedback


class FeedbackRepository(BaseRepository):
    """Repository for feedback database operations"""

    async def create(self, feedback: Feedback) -> Feedback:
        """Insert a feedback header and its answers in one transaction"""
        self.db.add(feedback)
        await self._commit()
        return feedback

    async def get_by_user_and_period(self, user_id: UUID, period_id: UUID) -> Optional[Feedback]:
        stmt = select(Feedback).where(
            and_(Feedback.user_id == user_id, Feedback.period_id == period_id)
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def list_all(self) -> List[Feedback]:
        """Every feedback with its answers, newest first"""
        stmt = select(Feedback).order_by(Feedback.created_at.desc())
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def list_by_target_department(self, department: str) -> List[Feedback]:
        stmt = (
            select(Feedback)
            .where(Feedback.target_department == department)
            .order_by(Feedback.created_at.desc())
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_submitted_departments(self, user_id: UUID) -> List[str]:
        """Distinct target departments a user has rated, in submission order"""
        stmt = (
            select(Feedback.target_department)
            .where(Feedback.user_id == user_id)
            .order_by(Feedback.created_at.asc())
        )
        result = await self.db.execute(stmt)
        return list(dict.fromkeys(result.scalars().all()))

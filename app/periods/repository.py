"""Feedback period repository for database operations"""
from uuid import UUID
from datetime import datetime
from typing import List, Optional
from sqlalchemy import select, and_
from app.db.repository import BaseRepository
from app.periods.models import FeedbackPeriod


class FeedbackPeriodRepository(BaseRepository):
    """Repository for feedback periods"""

    async def create(self, period: FeedbackPeriod) -> FeedbackPeriod:
        self.db.add(period)
        await self._commit()
        await self.db.refresh(period)
        return period

    async def get_by_id(self, period_id: UUID) -> Optional[FeedbackPeriod]:
        stmt = select(FeedbackPeriod).where(FeedbackPeriod.id == period_id)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def get_active_by_id(self, period_id: UUID) -> Optional[FeedbackPeriod]:
        stmt = select(FeedbackPeriod).where(
            and_(FeedbackPeriod.id == period_id, FeedbackPeriod.active.is_(True))
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def list_all(self) -> List[FeedbackPeriod]:
        stmt = select(FeedbackPeriod).order_by(FeedbackPeriod.created_at.desc())
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def list_open(self, now: datetime, department: Optional[str] = None) -> List[FeedbackPeriod]:
        """Active periods that end after `now`, soonest ending first"""
        conditions = [
            FeedbackPeriod.active.is_(True),
            FeedbackPeriod.end_date > now,
        ]
        if department is not None:
            conditions.append(FeedbackPeriod.department == department)
        stmt = select(FeedbackPeriod).where(and_(*conditions)).order_by(FeedbackPeriod.end_date.asc())
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def update(self, period: FeedbackPeriod) -> FeedbackPeriod:
        await self._commit()
        await self.db.refresh(period)
        return period

    async def delete(self, period: FeedbackPeriod) -> None:
        await self.db.delete(period)
        await self._commit()

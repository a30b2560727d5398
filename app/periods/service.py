"""Feedback period service layer"""
from uuid import UUID
from datetime import datetime
from typing import List, Sequence, Tuple
from sqlalchemy.ext.asyncio import AsyncSession
from app.auth.exceptions import UnknownDepartmentException
from app.feedback.repository import FeedbackRepository
from app.periods.availability import filter_available_periods
from app.periods.exceptions import FeedbackPeriodNotFoundException
from app.periods.models import FeedbackPeriod
from app.periods.repository import FeedbackPeriodRepository
from app.question_templates.schemas import Question
from app.utils.timezone import to_naive_utc, utcnow


class FeedbackPeriodService:
    """Service layer for feedback period business logic"""

    def __init__(self, db: AsyncSession, departments: Sequence[str]):
        self.repository = FeedbackPeriodRepository(db)
        self.feedback_repository = FeedbackRepository(db)
        self.departments = departments

    def _check_department(self, department: str) -> None:
        if department not in self.departments:
            raise UnknownDepartmentException(department)

    async def create_period(
        self,
        department: str,
        start_date: datetime,
        end_date: datetime,
        questions: List[Question],
    ) -> FeedbackPeriod:
        """Open a new (active) feedback period for a department."""
        self._check_department(department)
        period = FeedbackPeriod(
            department=department,
            start_date=to_naive_utc(start_date),
            end_date=to_naive_utc(end_date),
            questions=[q.model_dump() for q in questions],
            active=True,
        )
        return await self.repository.create(period)

    async def list_periods(self) -> List[FeedbackPeriod]:
        return await self.repository.list_all()

    async def get_open_period(self, period_id: UUID) -> FeedbackPeriod:
        """Get an active period, as needed to render the feedback form."""
        period = await self.repository.get_active_by_id(period_id)
        if not period:
            raise FeedbackPeriodNotFoundException(period_id)
        return period

    async def replace_period(
        self,
        period_id: UUID,
        department: str,
        start_date: datetime,
        end_date: datetime,
        questions: List[Question],
    ) -> FeedbackPeriod:
        """Full replace on edit; the active flag is left as is."""
        period = await self.repository.get_by_id(period_id)
        if not period:
            raise FeedbackPeriodNotFoundException(period_id)
        self._check_department(department)
        period.department = department
        period.start_date = to_naive_utc(start_date)
        period.end_date = to_naive_utc(end_date)
        period.questions = [q.model_dump() for q in questions]
        return await self.repository.update(period)

    async def toggle_period(self, period_id: UUID) -> FeedbackPeriod:
        """Flip the active flag."""
        period = await self.repository.get_by_id(period_id)
        if not period:
            raise FeedbackPeriodNotFoundException(period_id)
        period.active = not period.active
        return await self.repository.update(period)

    async def delete_period(self, period_id: UUID) -> None:
        period = await self.repository.get_by_id(period_id)
        if not period:
            raise FeedbackPeriodNotFoundException(period_id)
        await self.repository.delete(period)

    async def get_available_periods(
        self,
        user_id: UUID,
        user_department: str,
    ) -> Tuple[List[FeedbackPeriod], List[str]]:
        """
        Periods the user can still answer.

        Returns:
            Tuple of (available_periods, submitted_departments)
        """
        open_periods = await self.repository.list_open(utcnow())
        submitted = await self.feedback_repository.get_submitted_departments(user_id)
        available = filter_available_periods(open_periods, submitted, user_department)
        return available, submitted

"""Feedback service layer for business logic"""
import logging
from uuid import UUID
from typing import Dict, List, Optional, Sequence, Tuple
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from app.auth.exceptions import UnknownDepartmentException
from app.auth.models import JWTPayload
from app.feedback.models import Feedback, FeedbackAnswer
from app.feedback.repository import FeedbackRepository
from app.feedback.schemas import AnsweredQuestion, FeedbackResponse
from app.feedback.stats import compute_department_stats, parse_answers
from app.feedback.exceptions import (
    DepartmentNotFoundException,
    FeedbackAlreadySubmittedException,
    OwnDepartmentFeedbackException,
    PeriodDepartmentMismatchException,
)
from app.periods.exceptions import FeedbackPeriodNotFoundException, NoOpenPeriodException
from app.periods.repository import FeedbackPeriodRepository
from app.utils.timezone import utcnow

logger = logging.getLogger(__name__)


def to_response(feedback: Feedback) -> FeedbackResponse:
    """Convert Feedback model to response schema"""
    questions = parse_answers([
        {
            "id": answer.question_id,
            "text": answer.text,
            "rating": answer.rating,
            "comment": answer.comment,
        }
        for answer in feedback.answers
    ])
    return FeedbackResponse(
        id=feedback.id,
        period_id=feedback.period_id,
        user_id=feedback.user_id,
        user_name=feedback.user_name,
        user_email=feedback.user_email,
        user_department=feedback.user_department,
        target_department=feedback.target_department,
        questions=questions,
        additional_comment=feedback.additional_comment,
        created_at=feedback.created_at,
    )


class FeedbackService:
    """Service layer for feedback business logic"""

    def __init__(self, db: AsyncSession, departments: Sequence[str]):
        self.repository = FeedbackRepository(db)
        self.period_repository = FeedbackPeriodRepository(db)
        self.departments = departments

    async def submit_feedback(
        self,
        submitter: JWTPayload,
        target_department: str,
        questions: List[AnsweredQuestion],
        additional_comment: Optional[str] = None,
        period_id: Optional[UUID] = None,
    ) -> Feedback:
        """
        Record an employee's feedback on another department.

        Business rules:
        - Target must be a configured department other than the submitter's own
        - A given period must be active, unexpired and for the target
        - Without a period, the target's open period (soonest ending) is used
        - One feedback per user per period
        - Header and answers are stored atomically
        """
        if target_department not in self.departments:
            raise UnknownDepartmentException(target_department)
        if target_department == submitter.department:
            raise OwnDepartmentFeedbackException()

        if period_id is None:
            open_periods = await self.period_repository.list_open(utcnow(), department=target_department)
            if not open_periods:
                raise NoOpenPeriodException(target_department)
            period_id = open_periods[0].id
        else:
            period = await self.period_repository.get_active_by_id(period_id)
            if not period or period.end_date <= utcnow():
                raise FeedbackPeriodNotFoundException(period_id)
            if period.department != target_department:
                raise PeriodDepartmentMismatchException(period.department, target_department)

        if await self.repository.get_by_user_and_period(submitter.user_id, period_id):
            raise FeedbackAlreadySubmittedException(period_id)

        feedback = Feedback(
            period_id=period_id,
            user_id=submitter.user_id,
            user_name=submitter.name,
            user_email=submitter.email,
            user_department=submitter.department,
            target_department=target_department,
            additional_comment=additional_comment or None,
            answers=[
                FeedbackAnswer(
                    position=position,
                    question_id=question.id,
                    text=question.text,
                    rating=question.rating,
                    comment=question.comment or None,
                )
                for position, question in enumerate(questions)
            ],
        )

        try:
            feedback = await self.repository.create(feedback)
        except IntegrityError:
            # Only a concurrent submission for the same period is a conflict
            if await self.repository.get_by_user_and_period(submitter.user_id, period_id):
                raise FeedbackAlreadySubmittedException(period_id)
            raise

        logger.info(
            f"Feedback {feedback.id} submitted by {submitter.user_id} for {target_department}"
        )
        return feedback

    async def get_overview(self) -> Tuple[List[FeedbackResponse], List[Dict]]:
        """
        All feedback (newest first) plus statistics for every department.

        Returns:
            Tuple of (feedbacks, department_stats)
        """
        feedbacks = [to_response(f) for f in await self.repository.list_all()]
        return feedbacks, compute_department_stats(feedbacks, self.departments)

    async def get_department_stats(self) -> List[Dict]:
        _, stats = await self.get_overview()
        return stats

    async def list_for_department(self, department: str) -> List[FeedbackResponse]:
        if department not in self.departments:
            raise DepartmentNotFoundException(department)
        feedbacks = await self.repository.list_by_target_department(department)
        return [to_response(f) for f in feedbacks]

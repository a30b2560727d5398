"""Feedback Pydantic schemas"""
from uuid import UUID
from datetime import datetime
from typing import List, Optional
from pydantic import Field
from app.utils.schemas import CamelModel


class AnsweredQuestion(CamelModel):
    """A question together with the rating given to it"""
    id: str = Field(..., min_length=1)
    text: str
    rating: int = Field(..., ge=1, le=5, description="Rating: 1 (poor) to 5 (excellent)")
    comment: Optional[str] = None


class CreateFeedbackRequest(CamelModel):
    """Feedback submitted by the authenticated employee"""
    period_id: Optional[UUID] = None
    target_department: str = Field(..., min_length=1)
    questions: List[AnsweredQuestion] = Field(..., min_length=1)
    additional_comment: Optional[str] = None


class SubmitFeedbackResponse(CamelModel):
    id: UUID
    message: str


class FeedbackResponse(CamelModel):
    """Feedback response"""
    id: UUID
    period_id: Optional[UUID] = None
    user_id: UUID
    user_name: str
    user_email: str
    user_department: str
    target_department: str
    questions: List[AnsweredQuestion]
    additional_comment: Optional[str] = None
    created_at: datetime


class QuestionStats(CamelModel):
    """Average rating of one question within a department"""
    question_id: str
    question_text: str
    average_rating: float


class DepartmentStats(CamelModel):
    """Aggregated ratings received by a department"""
    department: str
    average_rating: float
    total_feedbacks: int
    question_stats: List[QuestionStats]


class FeedbackOverviewResponse(CamelModel):
    """All feedback plus per-department statistics (admin dashboard)"""
    feedbacks: List[FeedbackResponse]
    department_stats: List[DepartmentStats]
    total_feedbacks: int

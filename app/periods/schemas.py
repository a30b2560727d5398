"""Feedback period Pydantic schemas"""
from uuid import UUID
from datetime import datetime
from typing import List
from pydantic import Field, model_validator
from app.utils.schemas import CamelModel
from app.utils.timezone import to_naive_utc
from app.question_templates.schemas import Question


class FeedbackPeriodRequest(CamelModel):
    """Create or replace a feedback period"""
    department: str = Field(..., min_length=1)
    start_date: datetime
    end_date: datetime
    questions: List[Question] = Field(..., min_length=1)

    @model_validator(mode="after")
    def check_dates(self):
        if to_naive_utc(self.end_date) <= to_naive_utc(self.start_date):
            raise ValueError("endDate must be after startDate")
        return self


class FeedbackPeriodResponse(CamelModel):
    """Feedback period response"""
    id: UUID
    department: str
    start_date: datetime
    end_date: datetime
    questions: List[Question]
    active: bool
    created_at: datetime


class ToggleResponse(CamelModel):
    success: bool
    active: bool


class AvailableFeedbacksResponse(CamelModel):
    """Periods the caller can still answer, plus what they already answered"""
    feedback_periods: List[FeedbackPeriodResponse]
    submitted_departments: List[str]

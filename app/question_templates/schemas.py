"""Question template Pydantic schemas"""
from uuid import UUID
from datetime import datetime
from typing import List
from pydantic import Field
from app.utils.schemas import CamelModel


class Question(CamelModel):
    """A question as shown on a feedback form"""
    id: str = Field(..., min_length=1)
    text: str = Field(..., min_length=1)
    type: str = Field(..., min_length=1, description="Answer widget, e.g. 'rating'")


class QuestionTemplateRequest(CamelModel):
    """Create or replace a question template"""
    department: str = Field(..., min_length=1)
    questions: List[Question] = Field(..., min_length=1)


class QuestionTemplateResponse(CamelModel):
    """Question template response"""
    id: UUID
    department: str
    questions: List[Question]
    created_at: datetime

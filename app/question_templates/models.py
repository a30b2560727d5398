"""Question template database model"""
from uuid import uuid4
from sqlalchemy import Column, DateTime, ForeignKey, JSON, String, Uuid
from app.db.base import Base
from app.utils.timezone import utcnow


class QuestionTemplate(Base):
    """Reusable, ordered question list for a department"""
    __tablename__ = "question_templates"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid4)
    department = Column(String(100), ForeignKey("departments.name"), nullable=False, index=True)
    questions = Column(JSON, nullable=False, default=list)  # [{id, text, type}]
    created_at = Column(DateTime, default=utcnow, nullable=False)

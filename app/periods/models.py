"""Feedback period database model"""
from uuid import uuid4
from sqlalchemy import Boolean, CheckConstraint, Column, DateTime, ForeignKey, JSON, String, Uuid
from app.db.base import Base
from app.utils.timezone import utcnow


class FeedbackPeriod(Base):
    """Window during which employees may rate a department"""
    __tablename__ = "feedback_periods"
    __table_args__ = (
        CheckConstraint("end_date > start_date", name="ck_feedback_periods_dates"),
    )

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid4)
    department = Column(String(100), ForeignKey("departments.name"), nullable=False, index=True)
    start_date = Column(DateTime, nullable=False)
    end_date = Column(DateTime, nullable=False, index=True)
    questions = Column(JSON, nullable=False, default=list)  # [{id, text, type}]
    active = Column(Boolean, nullable=False, default=True, index=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)

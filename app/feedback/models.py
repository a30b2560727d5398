"""Feedback database models"""
from uuid import uuid4
from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import relationship
from app.db.base import Base
from app.utils.timezone import utcnow


class Feedback(Base):
    """One employee's ratings of another department. Append-only."""
    __tablename__ = "feedbacks"
    __table_args__ = (
        UniqueConstraint("user_id", "period_id", name="uq_feedbacks_user_period"),
    )

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid4)
    period_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("feedback_periods.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    user_id = Column(Uuid(as_uuid=True), ForeignKey("users.id"), nullable=False, index=True)
    user_name = Column(String(255), nullable=False)
    user_email = Column(String(255), nullable=False)
    user_department = Column(String(100), ForeignKey("departments.name"), nullable=False)
    target_department = Column(String(100), ForeignKey("departments.name"), nullable=False, index=True)
    additional_comment = Column(Text, nullable=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)

    answers = relationship(
        "FeedbackAnswer",
        back_populates="feedback",
        order_by="FeedbackAnswer.position",
        cascade="all, delete-orphan",
        lazy="selectin",
    )


class FeedbackAnswer(Base):
    """Rating (and optional comment) for a single question of a Feedback"""
    __tablename__ = "feedback_answers"
    __table_args__ = (
        CheckConstraint("rating >= 1 AND rating <= 5", name="ck_feedback_answers_rating"),
    )

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid4)
    feedback_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("feedbacks.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    position = Column(Integer, nullable=False)
    question_id = Column(String(100), nullable=False)
    text = Column(Text, nullable=False)
    rating = Column(Integer, nullable=False)  # 1-5
    comment = Column(Text, nullable=True)

    feedback = relationship("Feedback", back_populates="answers")

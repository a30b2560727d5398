"""Feedback REST API endpoints"""
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from app.config import settings
from app.db.postgres import get_db
from app.auth.middleware import JWTPayload, verify_token, check_permission
from app.feedback.service import FeedbackService
from app.feedback.schemas import (
    CreateFeedbackRequest,
    DepartmentStats,
    FeedbackOverviewResponse,
    FeedbackResponse,
    SubmitFeedbackResponse,
)


router = APIRouter(
    prefix="/api/feedbacks",
    tags=["feedback"],
)


def get_feedback_service(db: AsyncSession = Depends(get_db)) -> FeedbackService:
    """Dependency to get FeedbackService"""
    return FeedbackService(db, settings.departments)


@router.post("", response_model=SubmitFeedbackResponse, status_code=status.HTTP_201_CREATED)
async def submit_feedback(
    request: CreateFeedbackRequest,
    service: FeedbackService = Depends(get_feedback_service),
    jwt_payload: JWTPayload = Depends(verify_token),
):
    """
    Submit feedback on another department.

    The submitter's name, email and department are taken from the token.

    Required permission: feedback:create
    """
    check_permission(jwt_payload, "feedback:create")

    feedback = await service.submit_feedback(
        submitter=jwt_payload,
        target_department=request.target_department,
        questions=request.questions,
        additional_comment=request.additional_comment,
        period_id=request.period_id,
    )

    return SubmitFeedbackResponse(id=feedback.id, message="Feedback submitted successfully")


@router.get("", response_model=FeedbackOverviewResponse)
async def get_feedback_overview(
    service: FeedbackService = Depends(get_feedback_service),
    jwt_payload: JWTPayload = Depends(verify_token),
):
    """
    All feedback with per-department statistics (admin dashboard).

    Every configured department appears in departmentStats, in configured
    order, even when it has no feedback.

    Required permission: feedback:read (admin role)
    """
    check_permission(jwt_payload, "feedback:read")

    feedbacks, stats = await service.get_overview()

    return FeedbackOverviewResponse(
        feedbacks=feedbacks,
        department_stats=[DepartmentStats(**s) for s in stats],
        total_feedbacks=len(feedbacks),
    )


@router.get("/department/{department}", response_model=List[FeedbackResponse])
async def list_department_feedbacks(
    department: str,
    service: FeedbackService = Depends(get_feedback_service),
    jwt_payload: JWTPayload = Depends(verify_token),
):
    """
    Feedback received by one department, newest first.

    Required permission: feedback:read (admin role)
    """
    check_permission(jwt_payload, "feedback:read")
    return await service.list_for_department(department)

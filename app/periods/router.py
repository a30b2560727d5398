"""Feedback period REST API endpoints"""
from uuid import UUID
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from app.config import settings
from app.db.postgres import get_db
from app.auth.middleware import JWTPayload, verify_token, check_permission
from app.periods.models import FeedbackPeriod
from app.periods.service import FeedbackPeriodService
from app.periods.schemas import (
    AvailableFeedbacksResponse,
    FeedbackPeriodRequest,
    FeedbackPeriodResponse,
    ToggleResponse,
)


router = APIRouter(
    prefix="/api/feedback-periods",
    tags=["feedback-periods"],
)

availability_router = APIRouter(
    prefix="/api/available-feedbacks",
    tags=["feedback-periods"],
)


def get_period_service(db: AsyncSession = Depends(get_db)) -> FeedbackPeriodService:
    """Dependency to get FeedbackPeriodService"""
    return FeedbackPeriodService(db, settings.departments)


def to_response(period: FeedbackPeriod) -> FeedbackPeriodResponse:
    """Convert FeedbackPeriod model to response schema"""
    return FeedbackPeriodResponse(
        id=period.id,
        department=period.department,
        start_date=period.start_date,
        end_date=period.end_date,
        questions=period.questions or [],
        active=bool(period.active),
        created_at=period.created_at,
    )


@router.get("", response_model=List[FeedbackPeriodResponse])
async def list_periods(
    service: FeedbackPeriodService = Depends(get_period_service),
    jwt_payload: JWTPayload = Depends(verify_token),
):
    """
    List every feedback period, newest first.

    Required permission: period:manage (admin role)
    """
    check_permission(jwt_payload, "period:manage")
    return [to_response(p) for p in await service.list_periods()]


@router.post("", response_model=FeedbackPeriodResponse, status_code=status.HTTP_201_CREATED)
async def create_period(
    request: FeedbackPeriodRequest,
    service: FeedbackPeriodService = Depends(get_period_service),
    jwt_payload: JWTPayload = Depends(verify_token),
):
    """
    Open a feedback period for a department.

    Business rules:
    - Department must be one of the configured departments
    - endDate must be after startDate
    - New periods start active

    Required permission: period:manage (admin role)
    """
    check_permission(jwt_payload, "period:manage")
    period = await service.create_period(
        department=request.department,
        start_date=request.start_date,
        end_date=request.end_date,
        questions=request.questions,
    )
    return to_response(period)


@router.get("/{period_id}", response_model=FeedbackPeriodResponse)
async def get_period(
    period_id: UUID,
    service: FeedbackPeriodService = Depends(get_period_service),
    jwt_payload: JWTPayload = Depends(verify_token),
):
    """Get an active period with its questions (inactive periods are 404)."""
    return to_response(await service.get_open_period(period_id))


@router.put("/{period_id}", response_model=FeedbackPeriodResponse)
async def replace_period(
    period_id: UUID,
    request: FeedbackPeriodRequest,
    service: FeedbackPeriodService = Depends(get_period_service),
    jwt_payload: JWTPayload = Depends(verify_token),
):
    check_permission(jwt_payload, "period:manage")
    period = await service.replace_period(
        period_id=period_id,
        department=request.department,
        start_date=request.start_date,
        end_date=request.end_date,
        questions=request.questions,
    )
    return to_response(period)


@router.patch("/{period_id}/toggle", response_model=ToggleResponse)
async def toggle_period(
    period_id: UUID,
    service: FeedbackPeriodService = Depends(get_period_service),
    jwt_payload: JWTPayload = Depends(verify_token),
):
    """Activate an inactive period or deactivate an active one."""
    check_permission(jwt_payload, "period:manage")
    period = await service.toggle_period(period_id)
    return ToggleResponse(success=True, active=period.active)


@router.delete("/{period_id}")
async def delete_period(
    period_id: UUID,
    service: FeedbackPeriodService = Depends(get_period_service),
    jwt_payload: JWTPayload = Depends(verify_token),
):
    check_permission(jwt_payload, "period:manage")
    await service.delete_period(period_id)
    return {"success": True}


@availability_router.get("", response_model=AvailableFeedbacksResponse)
async def get_available_feedbacks(
    service: FeedbackPeriodService = Depends(get_period_service),
    jwt_payload: JWTPayload = Depends(verify_token),
):
    """
    Open periods the caller can still answer.

    Excludes the caller's own department and departments they already
    rated. Periods are ordered by end date, soonest first.

    Required permission: feedback:create
    """
    check_permission(jwt_payload, "feedback:create")
    periods, submitted = await service.get_available_periods(
        user_id=jwt_payload.user_id,
        user_department=jwt_payload.department,
    )
    return AvailableFeedbacksResponse(
        feedback_periods=[to_response(p) for p in periods],
        submitted_departments=submitted,
    )

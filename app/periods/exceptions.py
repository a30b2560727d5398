"""Feedback period custom exceptions"""
from uuid import UUID
from fastapi import HTTPException, status


class FeedbackPeriodNotFoundException(HTTPException):
    """Raised when a period does not exist, or is not open when it must be"""
    def __init__(self, period_id: UUID):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Feedback period {period_id} not found"
        )


class NoOpenPeriodException(HTTPException):
    """Raised when feedback names no period and the department has none open"""
    def __init__(self, department: str):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No open feedback period for {department}"
        )

"""Feedback custom exceptions"""
from uuid import UUID
from fastapi import HTTPException, status


class FeedbackAlreadySubmittedException(HTTPException):
    """Raised when a user rates the same feedback period twice"""
    def __init__(self, period_id: UUID):
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Feedback already submitted for period {period_id}"
        )


class OwnDepartmentFeedbackException(HTTPException):
    """Raised when a user tries to rate their own department"""
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="You cannot give feedback on your own department"
        )


class PeriodDepartmentMismatchException(HTTPException):
    """Raised when the target department differs from the period's department"""
    def __init__(self, period_department: str, target_department: str):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Period is for {period_department}, not {target_department}"
        )


class DepartmentNotFoundException(HTTPException):
    """Raised when listing feedback for a department that does not exist"""
    def __init__(self, department: str):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Department {department} not found"
        )

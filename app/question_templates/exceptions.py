"""Question template custom exceptions"""
from uuid import UUID
from fastapi import HTTPException, status


class QuestionTemplateNotFoundException(HTTPException):
    """Raised when a template id does not exist"""
    def __init__(self, template_id: UUID):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Question template {template_id} not found"
        )


class NoTemplateForDepartmentException(HTTPException):
    """Raised when a department has no template yet"""
    def __init__(self, department: str):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No template found for department {department}"
        )

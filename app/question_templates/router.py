"""Question template REST API endpoints"""
from uuid import UUID
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from app.config import settings
from app.db.postgres import get_db
from app.auth.middleware import JWTPayload, verify_token, check_permission
from app.question_templates.service import QuestionTemplateService
from app.question_templates.models import QuestionTemplate
from app.question_templates.schemas import QuestionTemplateRequest, QuestionTemplateResponse


router = APIRouter(
    prefix="/api/question-templates",
    tags=["question-templates"],
)


def get_template_service(db: AsyncSession = Depends(get_db)) -> QuestionTemplateService:
    """Dependency to get QuestionTemplateService"""
    return QuestionTemplateService(db, settings.departments)


def to_response(template: QuestionTemplate) -> QuestionTemplateResponse:
    """Convert QuestionTemplate model to response schema"""
    return QuestionTemplateResponse(
        id=template.id,
        department=template.department,
        questions=template.questions or [],
        created_at=template.created_at,
    )


@router.get("", response_model=List[QuestionTemplateResponse])
async def list_templates(
    service: QuestionTemplateService = Depends(get_template_service),
    jwt_payload: JWTPayload = Depends(verify_token),
):
    """
    List all question templates, newest first.

    Required permission: template:manage (admin role)
    """
    check_permission(jwt_payload, "template:manage")
    return [to_response(t) for t in await service.list_templates()]


@router.get("/{department}", response_model=QuestionTemplateResponse)
async def get_department_template(
    department: str,
    service: QuestionTemplateService = Depends(get_template_service),
    jwt_payload: JWTPayload = Depends(verify_token),
):
    """Most recent template for a department, used to prefill a new period."""
    return to_response(await service.get_for_department(department))


@router.post("", response_model=QuestionTemplateResponse, status_code=status.HTTP_201_CREATED)
async def create_template(
    request: QuestionTemplateRequest,
    service: QuestionTemplateService = Depends(get_template_service),
    jwt_payload: JWTPayload = Depends(verify_token),
):
    """
    Create a question template.

    Required permission: template:manage (admin role)
    """
    check_permission(jwt_payload, "template:manage")
    template = await service.create_template(request.department, request.questions)
    return to_response(template)


@router.put("/{template_id}", response_model=QuestionTemplateResponse)
async def update_template(
    template_id: UUID,
    request: QuestionTemplateRequest,
    service: QuestionTemplateService = Depends(get_template_service),
    jwt_payload: JWTPayload = Depends(verify_token),
):
    """Replace a template's department and questions."""
    check_permission(jwt_payload, "template:manage")
    template = await service.update_template(template_id, request.department, request.questions)
    return to_response(template)


@router.delete("/{template_id}")
async def delete_template(
    template_id: UUID,
    service: QuestionTemplateService = Depends(get_template_service),
    jwt_payload: JWTPayload = Depends(verify_token),
):
    check_permission(jwt_payload, "template:manage")
    await service.delete_template(template_id)
    return {"success": True}

"""Question template service layer"""
from uuid import UUID
from typing import List, Sequence
from sqlalchemy.ext.asyncio import AsyncSession
from app.auth.exceptions import UnknownDepartmentException
from app.question_templates.models import QuestionTemplate
from app.question_templates.repository import QuestionTemplateRepository
from app.question_templates.schemas import Question
from app.question_templates.exceptions import (
    NoTemplateForDepartmentException,
    QuestionTemplateNotFoundException,
)


class QuestionTemplateService:
    """Service layer for question template management"""

    def __init__(self, db: AsyncSession, departments: Sequence[str]):
        self.repository = QuestionTemplateRepository(db)
        self.departments = departments

    def _check_department(self, department: str) -> None:
        if department not in self.departments:
            raise UnknownDepartmentException(department)

    async def create_template(self, department: str, questions: List[Question]) -> QuestionTemplate:
        self._check_department(department)
        template = QuestionTemplate(
            department=department,
            questions=[q.model_dump() for q in questions],
        )
        return await self.repository.create(template)

    async def list_templates(self) -> List[QuestionTemplate]:
        return await self.repository.list_all()

    async def get_for_department(self, department: str) -> QuestionTemplate:
        template = await self.repository.get_latest_for_department(department)
        if not template:
            raise NoTemplateForDepartmentException(department)
        return template

    async def update_template(
        self,
        template_id: UUID,
        department: str,
        questions: List[Question],
    ) -> QuestionTemplate:
        """Replace department and questions of an existing template."""
        template = await self.repository.get_by_id(template_id)
        if not template:
            raise QuestionTemplateNotFoundException(template_id)
        self._check_department(department)
        template.department = department
        template.questions = [q.model_dump() for q in questions]
        return await self.repository.update(template)

    async def delete_template(self, template_id: UUID) -> None:
        template = await self.repository.get_by_id(template_id)
        if not template:
            raise QuestionTemplateNotFoundException(template_id)
        await self.repository.delete(template)

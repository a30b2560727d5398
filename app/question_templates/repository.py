"""Question template repository for database operations"""
from uuid import UUID
from typing import List, Optional
from sqlalchemy import select
from app.db.repository import BaseRepository
from app.question_templates.models import QuestionTemplate


class QuestionTemplateRepository(BaseRepository):
    """Repository for question templates"""

    async def create(self, template: QuestionTemplate) -> QuestionTemplate:
        self.db.add(template)
        await self._commit()
        await self.db.refresh(template)
        return template

    async def get_by_id(self, template_id: UUID) -> Optional[QuestionTemplate]:
        stmt = select(QuestionTemplate).where(QuestionTemplate.id == template_id)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def get_latest_for_department(self, department: str) -> Optional[QuestionTemplate]:
        """Most recently created template for a department"""
        stmt = (
            select(QuestionTemplate)
            .where(QuestionTemplate.department == department)
            .order_by(QuestionTemplate.created_at.desc())
            .limit(1)
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def list_all(self) -> List[QuestionTemplate]:
        stmt = select(QuestionTemplate).order_by(QuestionTemplate.created_at.desc())
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def update(self, template: QuestionTemplate) -> QuestionTemplate:
        await self._commit()
        await self.db.refresh(template)
        return template

    async def delete(self, template: QuestionTemplate) -> None:
        await self.db.delete(template)
        await self._commit()

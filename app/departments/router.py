"""Department reference data endpoint"""
from typing import List, Optional
from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from app.config import settings
from app.db.models import Department
from app.db.postgres import get_db
from app.utils.schemas import CamelModel


class DepartmentResponse(CamelModel):
    name: str
    description: Optional[str] = None


router = APIRouter(
    prefix="/api/departments",
    tags=["departments"],
)


@router.get("", response_model=List[DepartmentResponse])
async def list_departments(db: AsyncSession = Depends(get_db)):
    """Configured departments, in configured order."""
    result = await db.execute(select(Department))
    descriptions = {d.name: d.description for d in result.scalars().all()}
    return [
        DepartmentResponse(name=name, description=descriptions.get(name))
        for name in settings.departments
    ]

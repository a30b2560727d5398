"""Shared repository base helpers."""
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)


class BaseRepository:
    """Base repository with common DB helpers."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _commit(self):
        """Commit the current unit of work, rolling back if the database rejects it."""
        try:
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Transaction rolled back: {e}")
            raise

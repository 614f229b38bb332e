"""
Space repository for database operations.
"""
from typing import List
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from api.database.models.space import Space
from api.database.repositories.base import BaseRepository


class SpaceRepository(BaseRepository[Space]):
    """Repository for user-owned spaces."""

    def __init__(self, session: AsyncSession):
        """Initialize with session."""
        super().__init__(session, Space)

    async def get_by_creator(self, creator_id: UUID) -> List[Space]:
        """
        Get all spaces created by a user.

        Args:
            creator_id: Owning user UUID

        Returns:
            The user's spaces, oldest first
        """
        result = await self.session.execute(
            select(Space)
            .where(Space.creator_id == creator_id)
            .order_by(Space.created_at, Space.id)
        )
        return list(result.scalars().all())

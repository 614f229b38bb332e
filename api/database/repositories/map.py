"""
Map repository for database operations.
"""
from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from api.database.models.map import Map
from api.database.repositories.base import BaseRepository


class MapRepository(BaseRepository[Map]):
    """Repository for Map templates and their default elements."""

    def __init__(self, session: AsyncSession):
        """Initialize with session."""
        super().__init__(session, Map)

    async def get_by_id_with_elements(self, id: UUID) -> Optional[Map]:
        """
        Get a map by ID with its default elements loaded, in input order.

        Args:
            id: Map UUID

        Returns:
            Map instance or None if not found
        """
        result = await self.session.execute(
            select(Map).where(Map.id == id).options(selectinload(Map.map_elements))
        )
        return result.scalar_one_or_none()

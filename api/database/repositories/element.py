"""
Element repository for database operations.
"""
from typing import Iterable, Set
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from api.database.models.element import Element
from api.database.repositories.base import BaseRepository


class ElementRepository(BaseRepository[Element]):
    """Repository for catalog elements."""

    def __init__(self, session: AsyncSession):
        """Initialize with session."""
        super().__init__(session, Element)

    async def find_missing(self, element_ids: Iterable[UUID]) -> Set[UUID]:
        """
        Return the ids in element_ids that have no matching element.

        Args:
            element_ids: Element UUIDs to check
        """
        wanted = set(element_ids)
        if not wanted:
            return set()
        result = await self.session.execute(
            select(Element.id).where(Element.id.in_(wanted))
        )
        return wanted - set(result.scalars().all())

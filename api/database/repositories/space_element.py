"""
SpaceElement repository for database operations.
"""
from typing import List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from api.database.models.map_element import MapElement
from api.database.models.space_element import SpaceElement
from api.database.repositories.base import BaseRepository


class SpaceElementRepository(BaseRepository[SpaceElement]):
    """Repository for element placements inside spaces."""

    def __init__(self, session: AsyncSession):
        """Initialize with session."""
        super().__init__(session, SpaceElement)

    async def get_by_space(self, space_id: UUID) -> List[SpaceElement]:
        """
        Get every placement of a space, with its element loaded.

        Args:
            space_id: Space UUID
        """
        result = await self.session.execute(
            select(SpaceElement)
            .where(SpaceElement.space_id == space_id)
            .order_by(SpaceElement.created_at, SpaceElement.id)
        )
        return list(result.scalars().all())

    async def get_first_by_element(
        self, space_id: UUID, element_id: UUID
    ) -> Optional[SpaceElement]:
        """
        Get one placement of an element inside a space.

        Earlier placements come first; placements created in the same
        transaction share a timestamp and tie in no particular order.

        Args:
            space_id: Space UUID
            element_id: Catalog element UUID
        """
        result = await self.session.execute(
            select(SpaceElement)
            .where(
                SpaceElement.space_id == space_id,
                SpaceElement.element_id == element_id,
            )
            .order_by(SpaceElement.created_at, SpaceElement.id)
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def clone_from_template(
        self, space_id: UUID, template: List[MapElement]
    ) -> List[SpaceElement]:
        """
        Copy map default elements into a space as new placements.

        elementId, x and y are copied exactly; the rows are independent of
        the template afterwards.

        Args:
            space_id: Target space UUID
            template: Map default elements, in order
        """
        return await self.create_many(
            SpaceElement(space_id=space_id, element_id=me.element_id, x=me.x, y=me.y)
            for me in template
        )

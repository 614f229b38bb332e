"""
Space service: space creation, map instantiation and element placement.

This service handles:
- Creating empty spaces from explicit "WxH" dimensions
- Instantiating spaces from map templates (atomic space + clone)
- Admitting element placements against the space bounds
- Removing placements and deleting spaces (owner only)
- Reading a space and listing the caller's spaces

Placement does not look at the element's `static` flag: several elements,
static or not, may share a cell.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from api.database.models.space import Space
from api.database.models.space_element import SpaceElement
from api.database.repositories import (
    ElementRepository,
    MapRepository,
    SpaceElementRepository,
    SpaceRepository,
)
from api.services.access_control import require_owner
from api.services.auth_service import Identity
from api.services.exceptions import NotFoundError, OutOfBoundsError
from api.utils.parsing import parse_dimensions, parse_entity_id

logger = logging.getLogger(__name__)


@dataclass
class SpaceView:
    """A space together with all of its placements."""

    space: Space
    placements: List[SpaceElement]


class SpaceService:
    """Service for user-owned spaces and their element placements."""

    def __init__(self, session: AsyncSession):
        """
        Initialize the space service with a database session.

        Args:
            session: SQLAlchemy async session (injected via FastAPI Depends)
        """
        self.session = session
        self.space_repo = SpaceRepository(session)
        self.space_element_repo = SpaceElementRepository(session)
        self.map_repo = MapRepository(session)
        self.element_repo = ElementRepository(session)

    async def create_space(
        self,
        identity: Identity,
        name: str,
        dimensions: Optional[str] = None,
        map_id: Optional[str] = None,
    ) -> Space:
        """
        Create a space owned by the caller.

        Without a map the space is empty and sized by `dimensions`. With a
        map, `dimensions` is ignored: the space takes the map's size and
        thumbnail and receives a copy of every default element. The space
        row and the copies are committed together or not at all.

        Args:
            identity: Caller, becomes the space creator
            name: Space name
            dimensions: "WxH" string, required when map_id is not given
            map_id: Optional map template id

        Returns:
            The created Space

        Raises:
            ValidationError: If no map is given and dimensions is malformed
            NotFoundError: If map_id does not reference an existing map
        """
        if not map_id:
            width, height = parse_dimensions(dimensions)
            space = await self.space_repo.create(
                Space(name=name, width=width, height=height, creator_id=identity.user_id)
            )
            logger.info(f"Space created: {space.id} '{name}' {width}x{height} (empty)")
            return space

        map_ = await self.map_repo.get_by_id_with_elements(parse_entity_id(map_id, "Map"))
        if map_ is None:
            raise NotFoundError("Map not found")
        template_id = map_.id

        try:
            space = await self.space_repo.create(
                Space(
                    name=name,
                    width=map_.width,
                    height=map_.height,
                    thumbnail=map_.thumbnail,
                    creator_id=identity.user_id,
                )
            )
            cloned = await self.space_element_repo.clone_from_template(
                space.id, map_.map_elements
            )
            await self.session.commit()
        except Exception as e:
            await self.session.rollback()
            logger.error(f"Space creation from map {template_id} rolled back: {e}")
            raise

        logger.info(
            f"Space created: {space.id} '{name}' {space.dimensions} "
            f"from map {template_id} with {len(cloned)} elements"
        )
        return space

    async def get_space(self, space_id: str) -> SpaceView:
        """
        Get a space with its dimensions and every placement.

        Raises:
            NotFoundError: If the space does not exist
        """
        space = await self._load_space(space_id)
        placements = await self.space_element_repo.get_by_space(space.id)
        return SpaceView(space=space, placements=placements)

    async def list_spaces(self, identity: Identity) -> List[Space]:
        """List the caller's own spaces, never anyone else's."""
        return await self.space_repo.get_by_creator(identity.user_id)

    async def delete_space(self, identity: Identity, space_id: str) -> None:
        """
        Delete a space and all of its placements.

        Raises:
            NotFoundError: If the space does not exist
            AuthorizationError: If the caller is not the creator
        """
        space = await self._load_space(space_id)
        require_owner(identity, space)

        await self.space_repo.delete(space)
        logger.info(f"Space deleted: {space.id} by {identity.user_id}")

    async def add_element(
        self, identity: Identity, space_id: str, element_id: str, x: int, y: int
    ) -> SpaceElement:
        """
        Place an element at (x, y) in a space.

        Admission checks, in order: the space exists, the caller owns it,
        (x, y) lies within [0, width) x [0, height), the element exists.

        Raises:
            NotFoundError: If the space or the element does not exist
            AuthorizationError: If the caller is not the creator
            OutOfBoundsError: If (x, y) is outside the space
        """
        space = await self._load_space(space_id)
        require_owner(identity, space)

        if not space.contains(x, y):
            logger.warning(
                f"Placement ({x}, {y}) rejected: outside space {space.id} ({space.dimensions})"
            )
            raise OutOfBoundsError(
                f"Position ({x}, {y}) is outside the space bounds {space.dimensions}"
            )

        element = await self.element_repo.get_by_id(parse_entity_id(element_id, "Element"))
        if element is None:
            raise NotFoundError("Element not found")

        placement = await self.space_element_repo.create(
            SpaceElement(space_id=space.id, element_id=element.id, x=x, y=y)
        )
        logger.info(f"Element {element.id} placed at ({x}, {y}) in space {space.id}")
        return placement

    async def remove_element(self, identity: Identity, space_id: str, element_id: str) -> None:
        """
        Remove one placement of an element from a space.

        Raises:
            NotFoundError: If the space does not exist or holds no such element
            AuthorizationError: If the caller is not the creator
        """
        space = await self._load_space(space_id)
        require_owner(identity, space)

        placement = await self.space_element_repo.get_first_by_element(
            space.id, parse_entity_id(element_id, "Element")
        )
        if placement is None:
            raise NotFoundError("Element not found in space")

        await self.space_element_repo.delete(placement)
        logger.info(
            f"Element {placement.element_id} removed from ({placement.x}, {placement.y}) "
            f"in space {space.id}"
        )

    async def _load_space(self, space_id: str) -> Space:
        space = await self.space_repo.get_by_id(parse_entity_id(space_id, "Space"))
        if space is None:
            raise NotFoundError("Space not found")
        return space

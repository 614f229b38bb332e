"""
Catalog service: admin-authored elements, avatars and map templates.

Every write checks the caller's role first, so a non-admin request never
reaches the database.
"""

import logging
from typing import List, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from api.database.models.avatar import Avatar
from api.database.models.element import Element
from api.database.models.map import Map
from api.database.models.map_element import MapElement
from api.database.repositories import (
    AvatarRepository,
    ElementRepository,
    MapRepository,
)
from api.models.catalog_models import DefaultElement
from api.services.access_control import require_admin
from api.services.auth_service import Identity
from api.services.exceptions import NotFoundError, ValidationError
from api.utils.parsing import parse_dimensions, parse_entity_id

logger = logging.getLogger(__name__)


class CatalogService:
    """Service for catalog management and catalog reads."""

    def __init__(self, session: AsyncSession):
        """
        Args:
            session: SQLAlchemy async session (injected via FastAPI Depends)
        """
        self.session = session
        self.element_repo = ElementRepository(session)
        self.avatar_repo = AvatarRepository(session)
        self.map_repo = MapRepository(session)

    # Elements

    async def create_element(
        self,
        identity: Identity,
        image_url: str,
        width: int,
        height: int,
        static: bool,
    ) -> Element:
        """
        Create a catalog element.

        Raises:
            AuthorizationError: If the caller is not an admin
            ValidationError: If width or height is below 1
        """
        require_admin(identity)
        if width < 1 or height < 1:
            raise ValidationError("Element width and height must be at least 1")

        element = await self.element_repo.create(
            Element(image_url=image_url, width=width, height=height, static=static)
        )
        logger.info(f"Element created: {element.id} ({width}x{height}, static={static})")
        return element

    async def update_element(
        self, identity: Identity, element_id: str, image_url: Optional[str] = None
    ) -> Element:
        """
        Update an element. Only the image can change.

        Raises:
            AuthorizationError: If the caller is not an admin
            NotFoundError: If the element does not exist
        """
        require_admin(identity)
        element = await self.get_element(element_id)

        if image_url is not None:
            element.image_url = image_url
            element = await self.element_repo.update(element)
            logger.info(f"Element updated: {element.id}")
        return element

    async def get_element(self, element_id: str) -> Element:
        """
        Raises:
            NotFoundError: If the element does not exist
        """
        element = await self.element_repo.get_by_id(parse_entity_id(element_id, "Element"))
        if element is None:
            raise NotFoundError("Element not found")
        return element

    async def list_elements(self) -> List[Element]:
        return await self.element_repo.get_all(limit=1000)

    # Avatars

    async def create_avatar(self, identity: Identity, name: str, image_url: str) -> Avatar:
        """
        Raises:
            AuthorizationError: If the caller is not an admin
        """
        require_admin(identity)
        avatar = await self.avatar_repo.create(Avatar(name=name, image_url=image_url))
        logger.info(f"Avatar created: {avatar.id} ({name})")
        return avatar

    async def list_avatars(self) -> List[Avatar]:
        return await self.avatar_repo.get_all(limit=1000)

    # Maps

    async def create_map(
        self,
        identity: Identity,
        name: str,
        thumbnail: str,
        dimensions: str,
        default_elements: Sequence[DefaultElement],
    ) -> Map:
        """
        Create a map template and its default element placements.

        Default placements keep their input order and are not checked
        against the map bounds.

        Raises:
            AuthorizationError: If the caller is not an admin
            ValidationError: If dimensions is not a valid "WxH" string
            NotFoundError: If a default element references an unknown element
        """
        require_admin(identity)
        width, height = parse_dimensions(dimensions)

        element_ids = [parse_entity_id(de.element_id, "Element") for de in default_elements]
        missing = await self.element_repo.find_missing(element_ids)
        if missing:
            raise NotFoundError(
                f"Element not found: {', '.join(sorted(str(m) for m in missing))}"
            )

        map_ = Map(
            name=name,
            thumbnail=thumbnail,
            width=width,
            height=height,
            map_elements=[
                MapElement(element_id=element_id, x=de.x, y=de.y, position=position)
                for position, (element_id, de) in enumerate(zip(element_ids, default_elements))
            ],
        )
        map_ = await self.map_repo.create(map_)
        logger.info(
            f"Map created: {map_.id} '{name}' {width}x{height} "
            f"with {len(element_ids)} default elements"
        )
        return map_

    async def get_map(self, map_id: str) -> Map:
        """
        Get a map with its default elements.

        Raises:
            NotFoundError: If the map does not exist
        """
        map_ = await self.map_repo.get_by_id_with_elements(parse_entity_id(map_id, "Map"))
        if map_ is None:
            raise NotFoundError("Map not found")
        return map_

    async def list_maps(self) -> List[Map]:
        return await self.map_repo.get_all(limit=1000)

"""
Admin router: catalog management (elements, avatars, maps).

Every endpoint requires an Admin credential.
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from api.database.connection import get_db
from api.middleware.auth import get_current_admin
from api.models.base import IdResponse, MessageResponse
from api.models.catalog_models import (
    AvatarCreatedResponse,
    CreateAvatarRequest,
    CreateElementRequest,
    CreateMapRequest,
    UpdateElementRequest,
)
from api.services.auth_service import Identity
from api.services.catalog_service import CatalogService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/admin", tags=["admin"])


@router.post("/element", response_model=IdResponse)
async def create_element(
    request: CreateElementRequest,
    admin: Identity = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db),
) -> IdResponse:
    """Create a catalog element."""
    catalog = CatalogService(db)
    element = await catalog.create_element(
        admin,
        image_url=request.image_url,
        width=request.width,
        height=request.height,
        static=request.static,
    )
    return IdResponse(id=str(element.id))


@router.put("/element/{element_id}", response_model=MessageResponse)
async def update_element(
    element_id: str,
    request: UpdateElementRequest,
    admin: Identity = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db),
) -> MessageResponse:
    """
    Update a catalog element's image.

    Args:
        element_id: UUID of the element to update
        request: Fields to change (only imageUrl)
    """
    catalog = CatalogService(db)
    await catalog.update_element(admin, element_id, image_url=request.image_url)
    return MessageResponse(message="Element updated")


@router.post("/avatar", response_model=AvatarCreatedResponse)
async def create_avatar(
    request: CreateAvatarRequest,
    admin: Identity = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db),
) -> AvatarCreatedResponse:
    """Create a catalog avatar."""
    catalog = CatalogService(db)
    avatar = await catalog.create_avatar(admin, name=request.name, image_url=request.image_url)
    return AvatarCreatedResponse(avatar_id=str(avatar.id))


@router.post("/map", response_model=IdResponse)
async def create_map(
    request: CreateMapRequest,
    admin: Identity = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db),
) -> IdResponse:
    """
    Create a map template.

    `dimensions` is "WxH"; `defaultElements` are stored in the given order
    and copied into every space created from this map.
    """
    catalog = CatalogService(db)
    map_ = await catalog.create_map(
        admin,
        name=request.name,
        thumbnail=request.thumbnail,
        dimensions=request.dimensions,
        default_elements=request.default_elements,
    )
    return IdResponse(id=str(map_.id))

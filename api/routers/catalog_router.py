"""
Public catalog reads: elements, avatars and map templates.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from api.database.connection import get_db
from api.database.models.avatar import Avatar
from api.database.models.element import Element
from api.database.models.map import Map
from api.models.catalog_models import (
    AvatarListResponse,
    AvatarResponse,
    DefaultElement,
    ElementListResponse,
    ElementResponse,
    MapListResponse,
    MapResponse,
    MapSummaryResponse,
)
from api.services.catalog_service import CatalogService
from api.utils.parsing import format_dimensions

router = APIRouter(prefix="/api/v1", tags=["catalog"])


def element_to_response(element: Element) -> ElementResponse:
    return ElementResponse(
        id=str(element.id),
        image_url=element.image_url,
        width=element.width,
        height=element.height,
        static=element.static,
    )


def _avatar_to_response(avatar: Avatar) -> AvatarResponse:
    return AvatarResponse(id=str(avatar.id), name=avatar.name, image_url=avatar.image_url)


def _map_to_summary(map_: Map) -> MapSummaryResponse:
    return MapSummaryResponse(
        id=str(map_.id),
        name=map_.name,
        thumbnail=map_.thumbnail,
        dimensions=format_dimensions(map_.width, map_.height),
    )


@router.get("/elements", response_model=ElementListResponse)
async def list_elements(db: AsyncSession = Depends(get_db)) -> ElementListResponse:
    """List every catalog element."""
    elements = await CatalogService(db).list_elements()
    return ElementListResponse(elements=[element_to_response(e) for e in elements])


@router.get("/avatars", response_model=AvatarListResponse)
async def list_avatars(db: AsyncSession = Depends(get_db)) -> AvatarListResponse:
    """List every catalog avatar."""
    avatars = await CatalogService(db).list_avatars()
    return AvatarListResponse(avatars=[_avatar_to_response(a) for a in avatars])


@router.get("/maps", response_model=MapListResponse)
async def list_maps(db: AsyncSession = Depends(get_db)) -> MapListResponse:
    """List map templates (without their default elements)."""
    maps = await CatalogService(db).list_maps()
    return MapListResponse(maps=[_map_to_summary(m) for m in maps])


@router.get("/maps/{map_id}", response_model=MapResponse)
async def get_map(map_id: str, db: AsyncSession = Depends(get_db)) -> MapResponse:
    """Get a map template with its default elements in their stored order."""
    map_ = await CatalogService(db).get_map(map_id)
    summary = _map_to_summary(map_)
    return MapResponse(
        **summary.model_dump(),
        default_elements=[
            DefaultElement(element_id=str(me.element_id), x=me.x, y=me.y)
            for me in map_.map_elements
        ],
    )

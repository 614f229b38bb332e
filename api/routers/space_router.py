"""
Router for user-owned spaces and element placement.

Endpoints:
- POST /api/v1/space - Create a space (empty or from a map)
- GET /api/v1/space/all - List the caller's spaces
- POST /api/v1/space/element - Place an element in a space
- DELETE /api/v1/space/element - Remove an element from a space
- GET /api/v1/space/{space_id} - Get a space with its elements
- DELETE /api/v1/space/{space_id} - Delete a space
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from api.database.connection import get_db
from api.middleware.auth import get_current_identity
from api.models.base import IdResponse, MessageResponse
from api.models.space_models import (
    AddElementRequest,
    CreateSpaceRequest,
    PlacementResponse,
    RemoveElementRequest,
    SpaceCreatedResponse,
    SpaceDetailResponse,
    SpaceListResponse,
    SpaceSummaryResponse,
)
from api.routers.catalog_router import element_to_response
from api.services.auth_service import Identity
from api.services.space_service import SpaceService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/space", tags=["space"])


@router.post("", response_model=SpaceCreatedResponse)
async def create_space(
    request: CreateSpaceRequest,
    identity: Identity = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
) -> SpaceCreatedResponse:
    """
    Create a space owned by the caller.

    With `mapId` the space copies the map's dimensions and default elements
    and the `dimensions` field is ignored.
    """
    space = await SpaceService(db).create_space(
        identity,
        name=request.name,
        dimensions=request.dimensions,
        map_id=request.map_id,
    )
    return SpaceCreatedResponse(space_id=str(space.id))


@router.get("/all", response_model=SpaceListResponse)
async def list_spaces(
    identity: Identity = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
) -> SpaceListResponse:
    """List the caller's spaces."""
    spaces = await SpaceService(db).list_spaces(identity)
    return SpaceListResponse(
        spaces=[
            SpaceSummaryResponse(
                id=str(s.id),
                name=s.name,
                dimensions=s.dimensions,
                thumbnail=s.thumbnail,
            )
            for s in spaces
        ]
    )


@router.post("/element", response_model=IdResponse)
async def add_element(
    request: AddElementRequest,
    identity: Identity = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
) -> IdResponse:
    """
    Place an element at (x, y).

    Rejected with 400 when the space or element does not exist or the
    position is outside the space; 403 when the caller does not own it.
    """
    placement = await SpaceService(db).add_element(
        identity,
        space_id=request.space_id,
        element_id=request.element_id,
        x=request.x,
        y=request.y,
    )
    return IdResponse(id=str(placement.id))


@router.delete("/element", response_model=MessageResponse)
async def remove_element(
    request: RemoveElementRequest,
    identity: Identity = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
) -> MessageResponse:
    """Remove one placement of `elementId` from the space."""
    await SpaceService(db).remove_element(
        identity, space_id=request.space_id, element_id=request.element_id
    )
    return MessageResponse(message="Element removed from space")


@router.get("/{space_id}", response_model=SpaceDetailResponse)
async def get_space(
    space_id: str,
    identity: Identity = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
) -> SpaceDetailResponse:
    """Get a space's dimensions and every element placed in it."""
    view = await SpaceService(db).get_space(space_id)
    return SpaceDetailResponse(
        dimensions=view.space.dimensions,
        elements=[
            PlacementResponse(
                id=str(p.id),
                element=element_to_response(p.element),
                x=p.x,
                y=p.y,
            )
            for p in view.placements
        ],
    )


@router.delete("/{space_id}", response_model=MessageResponse)
async def delete_space(
    space_id: str,
    identity: Identity = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
) -> MessageResponse:
    """Delete a space. Only its creator may do this."""
    await SpaceService(db).delete_space(identity, space_id)
    return MessageResponse(message="Space deleted")

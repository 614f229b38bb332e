"""
User metadata router: avatar selection and bulk avatar lookup.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from api.database.connection import get_db
from api.middleware.auth import get_current_identity
from api.models.base import MessageResponse
from api.models.user_models import (
    BulkMetadataResponse,
    UpdateMetadataRequest,
    UserAvatarResponse,
)
from api.services.auth_service import Identity
from api.services.user_service import UserService

router = APIRouter(prefix="/api/v1/user", tags=["user"])


@router.post("/metadata", response_model=MessageResponse)
async def update_metadata(
    request: UpdateMetadataRequest,
    identity: Identity = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
) -> MessageResponse:
    """Set the caller's avatar. Unknown avatars are rejected with 400."""
    await UserService(db).update_metadata(identity, request.avatar_id)
    return MessageResponse(message="Metadata updated")


@router.get("/metadata/bulk", response_model=BulkMetadataResponse)
async def bulk_metadata(
    ids: Optional[str] = Query(None, description="User ids, e.g. [id1,id2]"),
    identity: Identity = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
) -> BulkMetadataResponse:
    """Return the avatar image of each listed user that exists."""
    users = await UserService(db).bulk_avatars(ids)
    return BulkMetadataResponse(
        avatars=[
            UserAvatarResponse(
                user_id=str(u.id),
                avatar_url=u.avatar.image_url if u.avatar else None,
            )
            for u in users
        ]
    )

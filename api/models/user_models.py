"""
Request/response models for user metadata.
"""

from typing import List, Optional

from pydantic import Field

from api.models.base import APIBaseModel


class UpdateMetadataRequest(APIBaseModel):
    avatar_id: str = Field(..., alias="avatarId")


class UserAvatarResponse(APIBaseModel):
    user_id: str = Field(..., alias="userId")
    avatar_url: Optional[str] = Field(None, alias="avatarUrl")


class BulkMetadataResponse(APIBaseModel):
    avatars: List[UserAvatarResponse]

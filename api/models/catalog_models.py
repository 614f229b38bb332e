"""
Request/response models for the admin catalog (elements, avatars, maps).
"""

from typing import List, Optional

from pydantic import Field, StrictBool, StrictInt

from api.models.base import APIBaseModel

DIMENSIONS_REGEX = r"^[0-9]{1,4}x[0-9]{1,4}$"

# Coordinates are stored in 32-bit integer columns
COORDINATE_MIN = -(2**31)
COORDINATE_MAX = 2**31 - 1


class CreateElementRequest(APIBaseModel):
    image_url: str = Field(..., alias="imageUrl", min_length=1)
    width: StrictInt = Field(..., gt=0)
    height: StrictInt = Field(..., gt=0)
    static: StrictBool = Field(..., description="Whether the element is meant to block movement")


class UpdateElementRequest(APIBaseModel):
    """Partial update; only the image can change."""

    image_url: Optional[str] = Field(None, alias="imageUrl", min_length=1)


class CreateAvatarRequest(APIBaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    image_url: str = Field(..., alias="imageUrl", min_length=1)


class DefaultElement(APIBaseModel):
    """One default placement of a map template."""

    element_id: str = Field(..., alias="elementId")
    x: StrictInt = Field(..., ge=COORDINATE_MIN, le=COORDINATE_MAX)
    y: StrictInt = Field(..., ge=COORDINATE_MIN, le=COORDINATE_MAX)


class CreateMapRequest(APIBaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    thumbnail: str = Field(..., min_length=1)
    dimensions: str = Field(..., pattern=DIMENSIONS_REGEX, description="WxH, e.g. 100x200")
    default_elements: List[DefaultElement] = Field(default_factory=list, alias="defaultElements")


class ElementResponse(APIBaseModel):
    id: str
    image_url: str = Field(..., alias="imageUrl")
    width: int
    height: int
    static: bool


class ElementListResponse(APIBaseModel):
    elements: List[ElementResponse]


class AvatarResponse(APIBaseModel):
    id: str
    name: str
    image_url: str = Field(..., alias="imageUrl")


class AvatarListResponse(APIBaseModel):
    avatars: List[AvatarResponse]


class AvatarCreatedResponse(APIBaseModel):
    avatar_id: str = Field(..., alias="avatarId")


class MapSummaryResponse(APIBaseModel):
    id: str
    name: str
    thumbnail: str
    dimensions: str


class MapResponse(MapSummaryResponse):
    default_elements: List[DefaultElement] = Field(..., alias="defaultElements")


class MapListResponse(APIBaseModel):
    maps: List[MapSummaryResponse]

"""
Request/response models for spaces and element placement.
"""

from typing import List, Optional

from pydantic import Field, StrictInt

from api.models.base import APIBaseModel
from api.models.catalog_models import COORDINATE_MAX, COORDINATE_MIN, ElementResponse


class CreateSpaceRequest(APIBaseModel):
    """
    Space creation body.

    dimensions is required without mapId and ignored with it.
    """

    name: str = Field(..., min_length=1, max_length=255)
    dimensions: Optional[str] = Field(None, description="WxH, e.g. 100x200")
    map_id: Optional[str] = Field(None, alias="mapId")


class SpaceCreatedResponse(APIBaseModel):
    space_id: str = Field(..., alias="spaceId")


class AddElementRequest(APIBaseModel):
    space_id: str = Field(..., alias="spaceId")
    element_id: str = Field(..., alias="elementId")
    x: StrictInt = Field(..., ge=COORDINATE_MIN, le=COORDINATE_MAX)
    y: StrictInt = Field(..., ge=COORDINATE_MIN, le=COORDINATE_MAX)


class RemoveElementRequest(APIBaseModel):
    space_id: str = Field(..., alias="spaceId")
    element_id: str = Field(..., alias="elementId")


class PlacementResponse(APIBaseModel):
    id: str = Field(..., description="Placement UUID")
    element: ElementResponse
    x: int
    y: int


class SpaceDetailResponse(APIBaseModel):
    dimensions: str
    elements: List[PlacementResponse]


class SpaceSummaryResponse(APIBaseModel):
    id: str
    name: str
    dimensions: str
    thumbnail: Optional[str] = None


class SpaceListResponse(APIBaseModel):
    spaces: List[SpaceSummaryResponse]

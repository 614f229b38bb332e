"""
Base Pydantic models with common configurations.

Request and response bodies use camelCase on the wire and snake_case in
Python; every model accepts both spellings when constructed.
"""

from pydantic import BaseModel, Field


class APIBaseModel(BaseModel):
    """
    Base model for API request and response bodies.
    """

    model_config = {
        "from_attributes": True,  # Allow ORM model conversion
        "populate_by_name": True,
    }


class MessageResponse(APIBaseModel):
    """Plain acknowledgement."""

    message: str = Field(..., description="Human readable result")


class IdResponse(APIBaseModel):
    """Id of a newly created entity."""

    id: str = Field(..., description="Entity UUID")

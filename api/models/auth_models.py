"""
Request/response models for signup and signin.
"""

from pydantic import Field, field_validator

from api.database.models.user_role import UserRole
from api.models.base import APIBaseModel


class SignupRequest(APIBaseModel):
    """Request body for account creation."""

    username: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1)
    type: UserRole = Field(
        default=UserRole.USER,
        description='Role tag, exactly "User" or "Admin"',
    )

    @field_validator("type", mode="before")
    @classmethod
    def parse_role(cls, value):
        if isinstance(value, UserRole):
            return value
        return UserRole.parse(value)


class SignupResponse(APIBaseModel):
    user_id: str = Field(..., alias="userId")


class SigninRequest(APIBaseModel):
    """Request body for credential issuance."""

    username: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1)


class SigninResponse(APIBaseModel):
    token: str = Field(..., description="Bearer credential")

"""
Authentication router: signup and signin.
"""
import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from api.database.connection import get_db
from api.models.auth_models import (
    SigninRequest,
    SigninResponse,
    SignupRequest,
    SignupResponse,
)
from api.services.auth_service import AuthService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["auth"])


@router.post("/signup", response_model=SignupResponse)
async def signup(
    request: SignupRequest,
    db: AsyncSession = Depends(get_db),
) -> SignupResponse:
    """
    Create an account.

    The optional `type` field selects the role and must be exactly
    "User" or "Admin".

    Returns:
        The new user's id

    Raises:
        ConflictError: If the username is taken (400)
    """
    auth_service = AuthService(db)
    user = await auth_service.signup(request.username, request.password, request.type)
    return SignupResponse(user_id=str(user.id))


@router.post("/signin", response_model=SigninResponse)
async def signin(
    request: SigninRequest,
    db: AsyncSession = Depends(get_db),
) -> SigninResponse:
    """
    Exchange a username and password for a bearer credential.

    Raises:
        InvalidCredentialsError: Unknown user or wrong password (403)
    """
    auth_service = AuthService(db)
    token = await auth_service.signin(request.username, request.password)
    return SigninResponse(token=token)

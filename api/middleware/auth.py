"""
Authentication dependencies for FastAPI.
"""

import logging
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from api.database.connection import get_db
from api.middleware.request_id import set_user_id
from api.services.access_control import require_admin
from api.services.auth_service import AuthService, Identity
from api.services.exceptions import AuthenticationError

logger = logging.getLogger(__name__)

# HTTP Bearer token scheme
security = HTTPBearer(auto_error=False)


async def _resolve_identity(
    credentials: Optional[HTTPAuthorizationCredentials],
    db: AsyncSession,
) -> Identity:
    """
    Verify the bearer credential and return the caller's identity.

    Raises:
        AuthenticationError: If the credential is missing or invalid (401)
    """
    if not credentials:
        raise AuthenticationError("Not authenticated")

    auth_service = AuthService(db)
    identity = await auth_service.verify_jwt(credentials.credentials)

    set_user_id(str(identity.user_id))
    return identity


async def get_current_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: AsyncSession = Depends(get_db),
) -> Identity:
    """
    FastAPI dependency to get the authenticated caller.

    Extracts the JWT from the Authorization header and validates it.

    Returns:
        Identity (user id and role) of the caller

    Raises:
        AuthenticationError: If not authenticated or token is invalid
    """
    return await _resolve_identity(credentials, db)


async def get_current_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: AsyncSession = Depends(get_db),
) -> Identity:
    """
    FastAPI dependency to get the authenticated admin.

    Raises:
        AuthenticationError: If not authenticated (401)
        AuthorizationError: If the caller is not an admin (403)
    """
    identity = await _resolve_identity(credentials, db)
    require_admin(identity)
    return identity

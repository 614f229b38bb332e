"""
Access control rules shared by the catalog and space services.

Both checks run before any write so that a rejected request has no
side effect.
"""

import logging

from api.database.models.space import Space
from api.services.auth_service import Identity
from api.services.exceptions import AuthorizationError

logger = logging.getLogger(__name__)


def require_admin(identity: Identity) -> None:
    """
    Raises:
        AuthorizationError: If the caller does not hold the Admin role
    """
    if not identity.is_admin:
        logger.warning(f"Admin operation denied for user {identity.user_id}")
        raise AuthorizationError("Admin privileges required")


def require_owner(identity: Identity, space: Space) -> None:
    """
    Ownership is decided by the stored creator id, never by client input.

    Raises:
        AuthorizationError: If the caller did not create the space
    """
    if space.creator_id != identity.user_id:
        logger.warning(
            f"User {identity.user_id} denied access to space {space.id} "
            f"owned by {space.creator_id}"
        )
        raise AuthorizationError("Only the space creator can modify this space")

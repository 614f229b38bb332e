"""
User metadata service: avatar selection and bulk avatar lookups.
"""

import logging
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from api.database.models.user import User
from api.database.repositories import AvatarRepository, UserRepository
from api.services.auth_service import Identity
from api.services.exceptions import AuthenticationError, NotFoundError
from api.utils.parsing import parse_entity_id, parse_id_list

logger = logging.getLogger(__name__)


class UserService:
    """Service for per-user metadata."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.user_repo = UserRepository(session)
        self.avatar_repo = AvatarRepository(session)

    async def update_metadata(self, identity: Identity, avatar_id: str) -> User:
        """
        Set the caller's avatar.

        Raises:
            NotFoundError: If the avatar does not exist
        """
        avatar = await self.avatar_repo.get_by_id(parse_entity_id(avatar_id, "Avatar"))
        if avatar is None:
            raise NotFoundError("Avatar not found")

        user = await self.user_repo.get_by_id(identity.user_id)
        if user is None:
            raise AuthenticationError("User not found")

        user = await self.user_repo.set_avatar(user, avatar.id)
        logger.info(f"User {user.id} switched avatar to {avatar.id}")
        return user

    async def bulk_avatars(self, raw_ids: Optional[str]) -> List[User]:
        """
        Look up several users' avatars.

        Args:
            raw_ids: "[id1,id2]" or "id1,id2"; malformed ids are skipped

        Returns:
            The users that exist, with their avatar loaded
        """
        return await self.user_repo.get_many_by_ids(parse_id_list(raw_ids))

"""
User repository for authentication and profile operations.
"""
from typing import List, Optional, Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from api.database.models.user import User
from api.database.models.user_role import UserRole
from api.database.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for User model with authentication-specific methods."""

    def __init__(self, session: AsyncSession):
        """Initialize repository with session."""
        super().__init__(session, User)

    async def get_by_username(self, username: str) -> Optional[User]:
        """
        Get user by username.

        Args:
            username: Unique username

        Returns:
            User instance or None if not found
        """
        result = await self.session.execute(
            select(User).where(User.username == username)
        )
        return result.scalar_one_or_none()

    async def create_user(
        self, username: str, password_hash: str, role: UserRole = UserRole.USER
    ) -> User:
        """
        Create a new user.

        Args:
            username: Unique username
            password_hash: Already hashed password
            role: User role

        Returns:
            Created User instance
        """
        user = User(username=username, password_hash=password_hash, role=role)
        return await self.create(user)

    async def get_many_by_ids(self, user_ids: Sequence[UUID]) -> List[User]:
        """
        Get all users whose id is in user_ids.

        Unknown ids are ignored.
        """
        if not user_ids:
            return []
        result = await self.session.execute(
            select(User).where(User.id.in_(user_ids)).order_by(User.username)
        )
        return list(result.scalars().all())

    async def set_avatar(self, user: User, avatar_id: Optional[UUID]) -> User:
        """
        Set the user's avatar.

        Args:
            user: User instance
            avatar_id: Catalog avatar id, or None to clear it
        """
        user.avatar_id = avatar_id
        return await self.update(user)

"""
Avatar repository for database operations.
"""
from sqlalchemy.ext.asyncio import AsyncSession

from api.database.models.avatar import Avatar
from api.database.repositories.base import BaseRepository


class AvatarRepository(BaseRepository[Avatar]):
    """Repository for catalog avatars."""

    def __init__(self, session: AsyncSession):
        """Initialize with session."""
        super().__init__(session, Avatar)

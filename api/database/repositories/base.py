"""
Base repository with common CRUD operations.
"""
from typing import Generic, Iterable, List, Optional, Type, TypeVar
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from api.database.connection import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with common database operations."""

    def __init__(self, session: AsyncSession, model: Type[ModelType]):
        """
        Initialize repository with session and model class.

        Args:
            session: SQLAlchemy async session
            model: SQLAlchemy model class
        """
        self.session = session
        self.model = model

    async def get_by_id(self, id: UUID) -> Optional[ModelType]:
        """
        Get a single record by ID.

        Args:
            id: Record UUID

        Returns:
            Model instance or None if not found
        """
        result = await self.session.execute(
            select(self.model).where(self.model.id == id)
        )
        return result.scalar_one_or_none()

    async def get_all(self, skip: int = 0, limit: int = 100) -> List[ModelType]:
        """
        Get records ordered by creation time, with pagination.

        Args:
            skip: Number of records to skip
            limit: Maximum number of records to return
        """
        result = await self.session.execute(
            select(self.model)
            .order_by(self.model.created_at, self.model.id)
            .offset(skip)
            .limit(limit)
        )
        return list(result.scalars().all())

    async def create(self, obj: ModelType) -> ModelType:
        """
        Create a new record.

        Args:
            obj: Model instance to create

        Returns:
            Created model instance, refreshed with server defaults
        """
        self.session.add(obj)
        await self.session.flush()
        await self.session.refresh(obj)
        return obj

    async def create_many(self, objs: Iterable[ModelType]) -> List[ModelType]:
        """
        Insert several records in one flush.

        Args:
            objs: Model instances to insert

        Returns:
            The inserted instances
        """
        objs = list(objs)
        self.session.add_all(objs)
        await self.session.flush()
        return objs

    async def update(self, obj: ModelType) -> ModelType:
        """
        Flush pending changes on an existing record.

        Args:
            obj: Model instance with updated values

        Returns:
            Updated model instance
        """
        await self.session.flush()
        await self.session.refresh(obj)
        return obj

    async def delete(self, obj: ModelType) -> None:
        """
        Delete a record.

        Args:
            obj: Model instance to delete
        """
        await self.session.delete(obj)
        await self.session.flush()

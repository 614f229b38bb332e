"""
Avatar SQLAlchemy model.
"""
from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import String, func
from sqlalchemy.orm import Mapped, mapped_column

from api.database.connection import Base


class Avatar(Base):
    """Catalog avatar: a named profile image users can pick."""

    __tablename__ = "avatars"

    id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)
    name: Mapped[str] = mapped_column(String(255))
    image_url: Mapped[str] = mapped_column(String(1000))

    created_at: Mapped[datetime] = mapped_column(default=func.now())

    def __repr__(self) -> str:
        return f"<Avatar(id={self.id}, name='{self.name}')>"

"""
User SQLAlchemy model for authentication.
"""

from datetime import datetime
from typing import TYPE_CHECKING, List, Optional
from uuid import UUID, uuid4

from sqlalchemy import Enum, ForeignKey, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from api.database.connection import Base
from api.database.models.user_role import UserRole

if TYPE_CHECKING:
    from api.database.models.avatar import Avatar
    from api.database.models.space import Space


class User(Base):
    """
    User model for username/password authentication.

    Holds the role used for access control and an optional weak reference
    to a catalog avatar.
    """

    __tablename__ = "users"

    id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)
    username: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(255))
    role: Mapped[UserRole] = mapped_column(
        Enum(
            UserRole,
            name="user_role",
            native_enum=False,
            length=10,
            values_callable=lambda roles: [r.value for r in roles],
        ),
        default=UserRole.USER,
    )
    avatar_id: Mapped[Optional[UUID]] = mapped_column(
        ForeignKey("avatars.id", ondelete="SET NULL"), nullable=True
    )

    created_at: Mapped[datetime] = mapped_column(default=func.now())

    # Relationships
    avatar: Mapped[Optional["Avatar"]] = relationship("Avatar", lazy="selectin")
    spaces: Mapped[List["Space"]] = relationship(
        "Space", back_populates="creator", cascade="all, delete-orphan"
    )

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username='{self.username}', role={self.role.value})>"

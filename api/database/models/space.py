"""
Space SQLAlchemy model.
"""
from datetime import datetime
from typing import TYPE_CHECKING, List, Optional
from uuid import UUID, uuid4

from sqlalchemy import CheckConstraint, ForeignKey, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from api.database.connection import Base

if TYPE_CHECKING:
    from api.database.models.space_element import SpaceElement
    from api.database.models.user import User


class Space(Base):
    """
    User-owned grid instance.

    Width and height are fixed at creation. The space exclusively owns its
    placements, which are deleted with it.
    """

    __tablename__ = "spaces"

    id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)
    name: Mapped[str] = mapped_column(String(255))
    width: Mapped[int] = mapped_column()
    height: Mapped[int] = mapped_column()
    thumbnail: Mapped[Optional[str]] = mapped_column(String(1000), nullable=True)
    creator_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), index=True
    )

    created_at: Mapped[datetime] = mapped_column(default=func.now())

    # Relationships
    creator: Mapped["User"] = relationship("User", back_populates="spaces")
    space_elements: Mapped[List["SpaceElement"]] = relationship(
        "SpaceElement",
        back_populates="space",
        cascade="all, delete-orphan",
    )

    __table_args__ = (
        CheckConstraint("width >= 1", name="ck_spaces_width_positive"),
        CheckConstraint("height >= 1", name="ck_spaces_height_positive"),
    )

    @property
    def dimensions(self) -> str:
        return f"{self.width}x{self.height}"

    def contains(self, x: int, y: int) -> bool:
        """Whether (x, y) lies inside [0, width) x [0, height)."""
        return 0 <= x < self.width and 0 <= y < self.height

    def __repr__(self) -> str:
        return f"<Space(id={self.id}, name='{self.name}', {self.dimensions}, creator_id={self.creator_id})>"

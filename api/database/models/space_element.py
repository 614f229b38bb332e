"""
SpaceElement SQLAlchemy model - element placements inside a space.
"""
from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlalchemy import ForeignKey, Index, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from api.database.connection import Base

if TYPE_CHECKING:
    from api.database.models.element import Element
    from api.database.models.space import Space


class SpaceElement(Base):
    """
    A catalog element placed at (x, y) in a space.

    Several placements may share the same cell, static or not.
    """

    __tablename__ = "space_elements"

    id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)
    space_id: Mapped[UUID] = mapped_column(
        ForeignKey("spaces.id", ondelete="CASCADE")
    )
    element_id: Mapped[UUID] = mapped_column(
        ForeignKey("elements.id", ondelete="CASCADE")
    )
    x: Mapped[int] = mapped_column()
    y: Mapped[int] = mapped_column()

    created_at: Mapped[datetime] = mapped_column(default=func.now())

    # Relationships
    space: Mapped["Space"] = relationship("Space", back_populates="space_elements")
    element: Mapped["Element"] = relationship("Element", lazy="selectin")

    __table_args__ = (
        Index("idx_space_elements_space_element", "space_id", "element_id"),
    )

    def __repr__(self) -> str:
        return f"<SpaceElement(space_id={self.space_id}, element_id={self.element_id}, x={self.x}, y={self.y})>"

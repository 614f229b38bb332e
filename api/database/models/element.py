"""
Element SQLAlchemy model.
"""
from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import Boolean, CheckConstraint, String, func
from sqlalchemy.orm import Mapped, mapped_column

from api.database.connection import Base


class Element(Base):
    """
    Catalog element: a visual tile that can be placed on maps and spaces.

    `static` documents whether the element is meant to block movement.
    Placement does not enforce it.
    Only image_url may change after creation.
    """

    __tablename__ = "elements"

    id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)
    image_url: Mapped[str] = mapped_column(String(1000))
    width: Mapped[int] = mapped_column()
    height: Mapped[int] = mapped_column()
    static: Mapped[bool] = mapped_column(Boolean, default=False)

    created_at: Mapped[datetime] = mapped_column(default=func.now())

    __table_args__ = (
        CheckConstraint("width >= 1", name="ck_elements_width_positive"),
        CheckConstraint("height >= 1", name="ck_elements_height_positive"),
    )

    def __repr__(self) -> str:
        return f"<Element(id={self.id}, {self.width}x{self.height}, static={self.static})>"

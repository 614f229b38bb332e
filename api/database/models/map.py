"""
Map SQLAlchemy model.
"""
from datetime import datetime
from typing import TYPE_CHECKING, List
from uuid import UUID, uuid4

from sqlalchemy import CheckConstraint, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from api.database.connection import Base

if TYPE_CHECKING:
    from api.database.models.map_element import MapElement


class Map(Base):
    """
    Map template: a named grid with an ordered set of default placements.

    Spaces created from a map copy its dimensions and clone its
    default elements.
    """

    __tablename__ = "maps"

    id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)
    name: Mapped[str] = mapped_column(String(255))
    width: Mapped[int] = mapped_column()
    height: Mapped[int] = mapped_column()
    thumbnail: Mapped[str] = mapped_column(String(1000))

    created_at: Mapped[datetime] = mapped_column(default=func.now())

    # Relationships
    map_elements: Mapped[List["MapElement"]] = relationship(
        "MapElement",
        back_populates="map",
        cascade="all, delete-orphan",
        order_by="MapElement.position",
        lazy="selectin",
    )

    __table_args__ = (
        CheckConstraint("width >= 1", name="ck_maps_width_positive"),
        CheckConstraint("height >= 1", name="ck_maps_height_positive"),
    )

    def __repr__(self) -> str:
        return f"<Map(id={self.id}, name='{self.name}', {self.width}x{self.height})>"

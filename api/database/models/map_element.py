"""
MapElement SQLAlchemy model - default placements of a map template.
"""
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlalchemy import ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship

from api.database.connection import Base

if TYPE_CHECKING:
    from api.database.models.element import Element
    from api.database.models.map import Map


class MapElement(Base):
    """
    One default element placement inside a map template.

    Coordinates are not checked against the map bounds.
    `position` keeps the order in which the placements were submitted.
    """

    __tablename__ = "map_elements"

    id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)
    map_id: Mapped[UUID] = mapped_column(
        ForeignKey("maps.id", ondelete="CASCADE"), index=True
    )
    element_id: Mapped[UUID] = mapped_column(
        ForeignKey("elements.id", ondelete="CASCADE"), index=True
    )
    x: Mapped[int] = mapped_column()
    y: Mapped[int] = mapped_column()
    position: Mapped[int] = mapped_column(default=0)

    # Relationships
    map: Mapped["Map"] = relationship("Map", back_populates="map_elements")
    element: Mapped["Element"] = relationship("Element", lazy="selectin")

    __table_args__ = (
        Index("idx_map_elements_map_position", "map_id", "position"),
    )

    def __repr__(self) -> str:
        return f"<MapElement(map_id={self.map_id}, element_id={self.element_id}, x={self.x}, y={self.y})>"

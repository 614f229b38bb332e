"""
SQLAlchemy models for the metaverse backend.
"""
from api.database.models.avatar import Avatar
from api.database.models.element import Element
from api.database.models.map import Map
from api.database.models.map_element import MapElement
from api.database.models.space import Space
from api.database.models.space_element import SpaceElement
from api.database.models.user import User
from api.database.models.user_role import UserRole

__all__ = [
    "Avatar",
    "Element",
    "Map",
    "MapElement",
    "Space",
    "SpaceElement",
    "User",
    "UserRole",
]

"""
Database repositories for the metaverse backend.
"""
from api.database.repositories.avatar import AvatarRepository
from api.database.repositories.base import BaseRepository
from api.database.repositories.element import ElementRepository
from api.database.repositories.map import MapRepository
from api.database.repositories.space import SpaceRepository
from api.database.repositories.space_element import SpaceElementRepository
from api.database.repositories.user import UserRepository

__all__ = [
    "AvatarRepository",
    "BaseRepository",
    "ElementRepository",
    "MapRepository",
    "SpaceRepository",
    "SpaceElementRepository",
    "UserRepository",
]

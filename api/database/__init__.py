"""
Database module for the metaverse backend.

Provides SQLAlchemy async database connection, models, and repositories.
"""
from api.database.connection import (
    Base,
    close_db,
    get_db,
    get_engine,
    get_session_maker,
    init_db,
)
from api.database.repositories import (
    AvatarRepository,
    BaseRepository,
    ElementRepository,
    MapRepository,
    SpaceElementRepository,
    SpaceRepository,
    UserRepository,
)

__all__ = [
    # Connection
    "Base",
    "get_engine",
    "get_session_maker",
    "get_db",
    "init_db",
    "close_db",
    # Repositories
    "BaseRepository",
    "AvatarRepository",
    "ElementRepository",
    "MapRepository",
    "SpaceRepository",
    "SpaceElementRepository",
    "UserRepository",
]

"""
Pytest configuration and shared fixtures.

Service tests run against an in-memory SQLite database; API tests drive the
FastAPI app through TestClient with the database dependency pointed at the
same kind of database.
"""

import os
import sys
from pathlib import Path
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

# Add the project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

os.environ.setdefault("JWT_SECRET_KEY", "test-secret")

from api.config.settings import reset_settings
from api.database.connection import Base
import api.database.models  # noqa: F401
from api.database.models.avatar import Avatar
from api.database.models.element import Element
from api.database.models.map import Map
from api.database.models.map_element import MapElement
from api.database.models.user import User
from api.database.models.user_role import UserRole
from api.services.auth_service import Identity, hash_password


def create_sqlite_engine() -> AsyncEngine:
    """In-memory SQLite engine shared by every connection, with FKs enforced."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return engine


@pytest.fixture(autouse=True)
def clean_settings():
    """Re-read settings from the environment for every test."""
    reset_settings()
    yield
    reset_settings()


@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    engine = create_sqlite_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine) -> AsyncGenerator[AsyncSession, None]:
    session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_maker() as session:
        yield session


async def make_user(
    session: AsyncSession,
    username: str,
    role: UserRole = UserRole.USER,
    password: str = "secret",
) -> User:
    user = User(username=username, password_hash=hash_password(password), role=role)
    session.add(user)
    await session.commit()
    return user


@pytest_asyncio.fixture
async def admin(session) -> Identity:
    """Committed Admin user."""
    return Identity.from_user(await make_user(session, "admin", UserRole.ADMIN))


@pytest_asyncio.fixture
async def alice(session) -> Identity:
    """Committed regular user."""
    return Identity.from_user(await make_user(session, "alice"))


@pytest_asyncio.fixture
async def bob(session) -> Identity:
    """A second regular user."""
    return Identity.from_user(await make_user(session, "bob"))


@pytest_asyncio.fixture
async def tree(session) -> Element:
    """Committed 1x1 static catalog element."""
    element = Element(image_url="https://example.com/tree.png", width=1, height=1, static=True)
    session.add(element)
    await session.commit()
    return element


@pytest_asyncio.fixture
async def chair(session) -> Element:
    """Committed 1x1 non-static catalog element."""
    element = Element(image_url="https://example.com/chair.png", width=1, height=1, static=False)
    session.add(element)
    await session.commit()
    return element


@pytest_asyncio.fixture
async def avatar(session) -> Avatar:
    avatar = Avatar(name="Timmy", image_url="https://example.com/timmy.png")
    session.add(avatar)
    await session.commit()
    return avatar


@pytest_asyncio.fixture
async def office_map(session, tree) -> Map:
    """Committed 100x200 map with two default placements of `tree`."""
    map_ = Map(
        name="Office",
        thumbnail="https://example.com/office.png",
        width=100,
        height=200,
        map_elements=[
            MapElement(element_id=tree.id, x=20, y=20, position=0),
            MapElement(element_id=tree.id, x=18, y=20, position=1),
        ],
    )
    session.add(map_)
    await session.commit()
    return map_

"""
Tests for CatalogService: elements, avatars and map templates.
"""

from uuid import uuid4

import pytest
from sqlalchemy import func, select

from api.database.models.map import Map
from api.models.catalog_models import DefaultElement
from api.services.catalog_service import CatalogService
from api.services.exceptions import NotFoundError, ValidationError


class TestElements:
    @pytest.mark.asyncio
    async def test_create_element(self, session, admin):
        element = await CatalogService(session).create_element(
            admin, image_url="https://example.com/desk.png", width=2, height=1, static=True
        )

        assert element.id is not None
        assert element.width == 2
        assert element.height == 1
        assert element.static is True

    @pytest.mark.asyncio
    async def test_create_element_rejects_zero_size(self, session, admin):
        with pytest.raises(ValidationError):
            await CatalogService(session).create_element(
                admin, image_url="https://example.com/x.png", width=0, height=1, static=False
            )

    @pytest.mark.asyncio
    async def test_update_element_changes_only_image(self, session, admin, tree):
        service = CatalogService(session)
        updated = await service.update_element(
            admin, str(tree.id), image_url="https://example.com/pine.png"
        )

        assert updated.image_url == "https://example.com/pine.png"
        assert (updated.width, updated.height, updated.static) == (1, 1, True)

    @pytest.mark.asyncio
    async def test_update_unknown_element(self, session, admin):
        with pytest.raises(NotFoundError):
            await CatalogService(session).update_element(
                admin, str(uuid4()), image_url="https://example.com/x.png"
            )

    @pytest.mark.asyncio
    async def test_update_malformed_id_is_not_found(self, session, admin):
        with pytest.raises(NotFoundError):
            await CatalogService(session).update_element(admin, "abc", image_url="x")

    @pytest.mark.asyncio
    async def test_list_elements(self, session, tree, chair):
        elements = await CatalogService(session).list_elements()
        assert {e.id for e in elements} == {tree.id, chair.id}


class TestAvatars:
    @pytest.mark.asyncio
    async def test_create_and_list(self, session, admin):
        service = CatalogService(session)
        avatar = await service.create_avatar(admin, name="Timmy", image_url="https://x/t.png")

        avatars = await service.list_avatars()
        assert [a.id for a in avatars] == [avatar.id]
        assert avatars[0].name == "Timmy"


class TestMaps:
    @pytest.mark.asyncio
    async def test_create_map_keeps_default_element_order(self, session, admin, tree, chair):
        service = CatalogService(session)
        map_ = await service.create_map(
            admin,
            name="Office",
            thumbnail="https://example.com/office.png",
            dimensions="100x200",
            default_elements=[
                DefaultElement(element_id=str(chair.id), x=5, y=5),
                DefaultElement(element_id=str(tree.id), x=20, y=20),
                DefaultElement(element_id=str(chair.id), x=1, y=2),
            ],
        )

        loaded = await service.get_map(str(map_.id))
        assert (loaded.width, loaded.height) == (100, 200)
        assert [(me.element_id, me.x, me.y) for me in loaded.map_elements] == [
            (chair.id, 5, 5),
            (tree.id, 20, 20),
            (chair.id, 1, 2),
        ]

    @pytest.mark.asyncio
    async def test_default_elements_are_not_bounds_checked(self, session, admin, tree):
        map_ = await CatalogService(session).create_map(
            admin,
            name="Tiny",
            thumbnail="https://example.com/tiny.png",
            dimensions="2x2",
            default_elements=[DefaultElement(element_id=str(tree.id), x=50, y=50)],
        )
        assert map_.map_elements[0].x == 50

    @pytest.mark.asyncio
    @pytest.mark.parametrize("dimensions", ["0x5", "12345x2", "10X10", "10x", "x10", "abc"])
    async def test_create_map_rejects_bad_dimensions(self, session, admin, dimensions):
        with pytest.raises(ValidationError):
            await CatalogService(session).create_map(
                admin,
                name="Bad",
                thumbnail="https://example.com/bad.png",
                dimensions=dimensions,
                default_elements=[],
            )

    @pytest.mark.asyncio
    async def test_unknown_default_element_creates_nothing(self, session, admin, tree):
        with pytest.raises(NotFoundError):
            await CatalogService(session).create_map(
                admin,
                name="Broken",
                thumbnail="https://example.com/broken.png",
                dimensions="10x10",
                default_elements=[
                    DefaultElement(element_id=str(tree.id), x=1, y=1),
                    DefaultElement(element_id=str(uuid4()), x=2, y=2),
                ],
            )

        count = await session.scalar(select(func.count()).select_from(Map))
        assert count == 0

    @pytest.mark.asyncio
    async def test_get_unknown_map(self, session):
        with pytest.raises(NotFoundError):
            await CatalogService(session).get_map(str(uuid4()))

    @pytest.mark.asyncio
    async def test_list_maps(self, session, office_map):
        maps = await CatalogService(session).list_maps()
        assert [m.id for m in maps] == [office_map.id]

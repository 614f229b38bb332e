"""
Tests for UserService: avatar selection and bulk avatar lookup.
"""

from uuid import uuid4

import pytest

from api.services.exceptions import NotFoundError
from api.services.user_service import UserService


class TestUpdateMetadata:
    @pytest.mark.asyncio
    async def test_set_avatar(self, session, alice, avatar):
        user = await UserService(session).update_metadata(alice, str(avatar.id))
        assert user.avatar_id == avatar.id

    @pytest.mark.asyncio
    async def test_unknown_avatar(self, session, alice):
        with pytest.raises(NotFoundError):
            await UserService(session).update_metadata(alice, str(uuid4()))

    @pytest.mark.asyncio
    async def test_malformed_avatar_id(self, session, alice):
        with pytest.raises(NotFoundError):
            await UserService(session).update_metadata(alice, "not-a-uuid")


class TestBulkAvatars:
    @pytest.mark.asyncio
    async def test_bracketed_list(self, session, alice, bob, avatar):
        service = UserService(session)
        await service.update_metadata(alice, str(avatar.id))

        users = await service.bulk_avatars(f"[{alice.user_id},{bob.user_id}]")
        by_id = {u.id: u for u in users}

        assert set(by_id) == {alice.user_id, bob.user_id}
        assert by_id[alice.user_id].avatar_id == avatar.id
        assert by_id[bob.user_id].avatar_id is None

    @pytest.mark.asyncio
    async def test_unknown_and_malformed_ids_are_skipped(self, session, alice):
        users = await UserService(session).bulk_avatars(f"{alice.user_id},{uuid4()},junk")
        assert [u.id for u in users] == [alice.user_id]

    @pytest.mark.asyncio
    async def test_empty(self, session):
        assert await UserService(session).bulk_avatars(None) == []

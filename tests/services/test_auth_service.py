"""
Tests for AuthService: signup, signin and credential verification.
"""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest
from jose import jwt

from api.config.settings import get_settings
from api.database.models.user_role import UserRole
from api.services.auth_service import AuthService, hash_password, verify_password
from api.services.exceptions import (
    AuthenticationError,
    ConflictError,
    InvalidCredentialsError,
)


class TestPasswordHashing:
    def test_hash_is_not_plain_text(self):
        hashed = hash_password("secret")
        assert hashed != "secret"
        assert verify_password("secret", hashed)

    def test_wrong_password_does_not_verify(self):
        assert not verify_password("wrong", hash_password("secret"))

    def test_foreign_hash_format_does_not_verify(self):
        assert not verify_password("secret", "not-a-hash")


class TestSignup:
    @pytest.mark.asyncio
    async def test_signup_creates_user_with_default_role(self, session):
        user = await AuthService(session).signup("carol", "pw")

        assert user.id is not None
        assert user.username == "carol"
        assert user.role == UserRole.USER
        assert user.password_hash != "pw"

    @pytest.mark.asyncio
    async def test_signup_admin(self, session):
        user = await AuthService(session).signup("root", "pw", UserRole.ADMIN)
        assert user.role == UserRole.ADMIN
        assert user.is_admin

    @pytest.mark.asyncio
    async def test_duplicate_username_conflicts(self, session, alice):
        with pytest.raises(ConflictError):
            await AuthService(session).signup("alice", "other")


class TestSignin:
    @pytest.mark.asyncio
    async def test_signin_returns_token_for_user(self, session, alice):
        service = AuthService(session)
        token = await service.signin("alice", "secret")

        identity = await service.verify_jwt(token)
        assert identity.user_id == alice.user_id
        assert identity.role == UserRole.USER

    @pytest.mark.asyncio
    async def test_wrong_password(self, session, alice):
        with pytest.raises(InvalidCredentialsError) as exc_info:
            await AuthService(session).signin("alice", "nope")
        assert exc_info.value.status_code == 403

    @pytest.mark.asyncio
    async def test_unknown_user(self, session):
        with pytest.raises(InvalidCredentialsError):
            await AuthService(session).signin("ghost", "secret")


class TestVerifyJwt:
    @pytest.mark.asyncio
    async def test_token_carries_role_claim(self, session, admin):
        service = AuthService(session)
        token = await service.signin("admin", "secret")

        settings = get_settings()
        claims = jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
        assert claims["sub"] == str(admin.user_id)
        assert claims["role"] == "Admin"

        identity = await service.verify_jwt(token)
        assert identity.is_admin

    @pytest.mark.asyncio
    async def test_garbage_token(self, session):
        with pytest.raises(AuthenticationError) as exc_info:
            await AuthService(session).verify_jwt("not.a.token")
        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_token_signed_with_other_secret(self, session, alice):
        token = jwt.encode({"sub": str(alice.user_id)}, "other-secret", algorithm="HS256")
        with pytest.raises(AuthenticationError):
            await AuthService(session).verify_jwt(token)

    @pytest.mark.asyncio
    async def test_expired_token(self, session, alice):
        settings = get_settings()
        token = jwt.encode(
            {
                "sub": str(alice.user_id),
                "exp": datetime.now(timezone.utc) - timedelta(hours=1),
            },
            settings.jwt_secret_key,
            algorithm=settings.jwt_algorithm,
        )
        with pytest.raises(AuthenticationError):
            await AuthService(session).verify_jwt(token)

    @pytest.mark.asyncio
    async def test_token_for_deleted_user(self, session):
        settings = get_settings()
        token = jwt.encode(
            {"sub": str(uuid4())}, settings.jwt_secret_key, algorithm=settings.jwt_algorithm
        )
        with pytest.raises(AuthenticationError):
            await AuthService(session).verify_jwt(token)

    @pytest.mark.asyncio
    async def test_token_without_subject(self, session):
        settings = get_settings()
        token = jwt.encode({"role": "Admin"}, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)
        with pytest.raises(AuthenticationError):
            await AuthService(session).verify_jwt(token)

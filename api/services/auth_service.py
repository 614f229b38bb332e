"""
Authentication service: password credentials and JWT handling.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from uuid import UUID

from jose import JWTError, jwt
from passlib.hash import pbkdf2_sha256
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from api.config.settings import get_settings
from api.database.models.user import User
from api.database.models.user_role import UserRole
from api.database.repositories.user import UserRepository
from api.services.exceptions import (
    AuthenticationError,
    ConflictError,
    InvalidCredentialsError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Identity:
    """Authenticated caller: who they are and which role they hold."""

    user_id: UUID
    role: UserRole

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    @classmethod
    def from_user(cls, user: User) -> "Identity":
        return cls(user_id=user.id, role=user.role)


def hash_password(password: str) -> str:
    return pbkdf2_sha256.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return pbkdf2_sha256.verify(password, password_hash)
    except ValueError:
        # Stored hash is not a pbkdf2_sha256 hash
        return False


class AuthService:
    """Service for signup, signin and credential verification."""

    def __init__(self, session: AsyncSession):
        """
        Initialize auth service.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session
        self.user_repo = UserRepository(session)
        self.settings = get_settings()

    async def signup(
        self, username: str, password: str, role: UserRole = UserRole.USER
    ) -> User:
        """
        Register a new user.

        Args:
            username: Unique username
            password: Plain text password (stored hashed)
            role: Role tag for the new user

        Returns:
            Created User instance

        Raises:
            ConflictError: If the username is already taken
        """
        if await self.user_repo.get_by_username(username) is not None:
            raise ConflictError(f"Username '{username}' is already taken")

        try:
            user = await self.user_repo.create_user(
                username=username,
                password_hash=hash_password(password),
                role=role,
            )
        except IntegrityError:
            # Lost a race against a concurrent signup with the same username
            await self.session.rollback()
            raise ConflictError(f"Username '{username}' is already taken")

        logger.info(f"User signed up: {username} ({role.value})")
        return user

    async def signin(self, username: str, password: str) -> str:
        """
        Check a username/password pair and issue a credential.

        Returns:
            JWT token string

        Raises:
            InvalidCredentialsError: If the user does not exist or the
                password does not match
        """
        user = await self.user_repo.get_by_username(username)
        if user is None or not verify_password(password, user.password_hash):
            logger.warning(f"Failed sign in for username: {username}")
            raise InvalidCredentialsError("Invalid username or password")

        logger.info(f"User signed in: {username}")
        return self.create_jwt(user)

    def create_jwt(self, user: User) -> str:
        """
        Create a JWT token for a user.

        Args:
            user: User instance

        Returns:
            JWT token string
        """
        now = datetime.now(timezone.utc)
        payload = {
            "sub": str(user.id),
            "role": user.role.value,
            "exp": now + timedelta(hours=self.settings.jwt_expire_hours),
            "iat": now,
        }

        return jwt.encode(
            payload,
            self.settings.jwt_secret_key,
            algorithm=self.settings.jwt_algorithm,
        )

    async def verify_jwt(self, token: str) -> Identity:
        """
        Verify a JWT token and resolve the caller's identity.

        The role is read from the stored user, so a role change takes effect
        without reissuing credentials.

        Args:
            token: JWT token string

        Returns:
            Identity of the token's user

        Raises:
            AuthenticationError: If the token is invalid or the user is gone
        """
        try:
            payload = jwt.decode(
                token,
                self.settings.jwt_secret_key,
                algorithms=[self.settings.jwt_algorithm],
            )
        except JWTError as e:
            logger.warning(f"JWT verification failed: {e}")
            raise AuthenticationError("Invalid or expired token")

        user_id = payload.get("sub")
        if not user_id:
            raise AuthenticationError("Invalid token: missing user ID")

        try:
            user_uuid = UUID(user_id)
        except ValueError:
            raise AuthenticationError("Invalid token: malformed user ID")

        user = await self.user_repo.get_by_id(user_uuid)
        if user is None:
            raise AuthenticationError("User not found")

        return Identity.from_user(user)

"""
Application settings using Pydantic Settings.

Centralizes database, credential and server configuration, loaded from
environment variables (or a .env file) with type validation and defaults.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class AppSettings(BaseSettings):
    """
    Settings for the metaverse backend.

    Every field can be overridden through the environment variable named in
    its alias.
    """

    # Database
    database_url: Optional[str] = Field(
        default=None,
        alias="DATABASE_URL",
        description="Full async SQLAlchemy URL (overrides the POSTGRES_* fields)"
    )
    postgres_host: str = Field(default="localhost", alias="POSTGRES_HOST")
    postgres_port: int = Field(default=5432, alias="POSTGRES_PORT")
    postgres_database: str = Field(default="metaverse", alias="POSTGRES_DATABASE")
    postgres_user: str = Field(default="metaverse", alias="POSTGRES_USER")
    postgres_password: str = Field(default="metaverse", alias="POSTGRES_PASSWORD")
    postgres_pool_max_size: int = Field(
        default=10,
        alias="POSTGRES_POOL_MAX_SIZE",
        description="Connection pool size for the main engine"
    )
    create_tables_on_startup: bool = Field(
        default=False,
        alias="CREATE_TABLES_ON_STARTUP",
        description="Run metadata.create_all when the app starts (dev only)"
    )

    # Credentials
    jwt_secret_key: str = Field(
        default="change-me",
        alias="JWT_SECRET_KEY",
        description="Secret used to sign bearer credentials"
    )
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    jwt_expire_hours: int = Field(
        default=24,
        alias="JWT_EXPIRE_HOURS",
        description="Credential lifetime in hours"
    )

    # Server / CLI
    metaverse_host: str = Field(
        default="127.0.0.1",
        alias="METAVERSE_HOST",
        description="API server host"
    )
    metaverse_port: int = Field(
        default=8000,
        alias="METAVERSE_PORT",
        description="API server port"
    )
    metaverse_api_url: str = Field(
        default="http://localhost:8000/api/v1",
        alias="METAVERSE_API_URL",
        description="Base URL used by the CLI"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "env_prefix": "",
        "extra": "ignore",
        "populate_by_name": True,
    }

    def uses_postgres(self) -> bool:
        """Whether the configured database is PostgreSQL."""
        return self.database_url is None or self.database_url.startswith("postgresql")


# Global settings instance
_settings: Optional[AppSettings] = None


def get_settings() -> AppSettings:
    """
    Get global settings instance (singleton pattern).

    Returns:
        Validated AppSettings instance
    """
    global _settings
    if _settings is None:
        _settings = AppSettings()
    return _settings


def reset_settings() -> None:
    """Reset global settings (useful for testing)."""
    global _settings
    _settings = None

"""Application settings using pydantic-settings.

Settings are loaded from environment variables with sensible defaults
for development. Production deployments should set all values explicitly.
"""

from functools import lru_cache

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """Database connection settings.

    Environment variables:
        CONTACTS_DB_HOST: Database host (default: localhost)
        CONTACTS_DB_PORT: Database port (default: 5432)
        CONTACTS_DB_DATABASE: Database name (default: contacts)
        CONTACTS_DB_USERNAME: Database user (default: contacts)
        CONTACTS_DB_PASSWORD: Database password (required in production)
        CONTACTS_DB_POOL_SIZE: Connections kept in the pool (default: 10)
        CONTACTS_DB_URL: Full SQLAlchemy async URL, overrides the fields above
        CONTACTS_DB_CREATE_SCHEMA: Create tables at startup instead of
            relying on migrations (default: false)
    """

    model_config = SettingsConfigDict(
        env_prefix="CONTACTS_DB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = Field(default="localhost", description="Database host")
    port: int = Field(default=5432, description="Database port")
    database: str = Field(default="contacts", description="Database name")
    username: str = Field(default="contacts", description="Database username")
    password: SecretStr = Field(
        default=SecretStr(""),
        description="Database password",
    )
    pool_size: int = Field(
        default=10,
        description="Connections kept in the pool",
        ge=1,
        le=100,
    )
    url: str | None = Field(
        default=None,
        description="Full async database URL (e.g. sqlite+aiosqlite:///./dev.db)",
    )
    create_schema: bool = Field(
        default=False,
        description="Create all tables on startup",
    )

    @property
    def connection_string(self) -> str:
        """Generate a connection string (without password for logging)."""
        if self.url is not None:
            return self.url.split("@")[-1]
        return f"postgresql://{self.username}@{self.host}:{self.port}/{self.database}"

    @property
    def is_sqlite(self) -> bool:
        """Whether the configured URL targets SQLite."""
        return self.url is not None and self.url.startswith("sqlite")

    @property
    def is_sqlite_memory(self) -> bool:
        """Whether the configured URL targets an in-memory SQLite database."""
        if not self.is_sqlite:
            return False
        _, _, database = self.url.partition("://")
        return database in ("", "/", "/:memory:") or "mode=memory" in database


class IAMSettings(BaseSettings):
    """Tenant administration settings.

    Environment variables:
        CONTACTS_IAM_BOOTSTRAP_ADMIN_USERNAME: Username of the admin tenant
            created at startup when missing (default: unset, no bootstrap)
        CONTACTS_IAM_BOOTSTRAP_ADMIN_PASSWORD: Password for that tenant
        CONTACTS_IAM_BOOTSTRAP_ADMIN_NAME: Display name (default: Administrator)
    """

    model_config = SettingsConfigDict(
        env_prefix="CONTACTS_IAM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    bootstrap_admin_username: str | None = Field(
        default=None,
        description="Username for the bootstrap admin tenant",
    )
    bootstrap_admin_password: SecretStr | None = Field(
        default=None,
        description="Password for the bootstrap admin tenant",
    )
    bootstrap_admin_name: str = Field(
        default="Administrator",
        description="Display name for the bootstrap admin tenant",
    )

    @model_validator(mode="after")
    def validate_bootstrap_pair(self) -> "IAMSettings":
        """Require the admin password whenever the admin username is set."""
        if self.bootstrap_admin_username and self.bootstrap_admin_password is None:
            raise ValueError(
                "bootstrap_admin_password must be set when "
                "bootstrap_admin_username is configured"
            )
        return self

    @property
    def bootstrap_enabled(self) -> bool:
        """Whether an admin tenant should be provisioned at startup."""
        return bool(self.bootstrap_admin_username)


class Settings(BaseSettings):
    """Main application settings aggregating all configuration sections."""

    model_config = SettingsConfigDict(
        env_prefix="CONTACTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    app_name: str = Field(default="Contacts API", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")
    log_level: str = Field(default="INFO", description="Minimum log level")

    @property
    def database(self) -> DatabaseSettings:
        """Get database settings."""
        return get_database_settings()

    @property
    def iam(self) -> IAMSettings:
        """Get IAM settings."""
        return get_iam_settings()


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


@lru_cache
def get_database_settings() -> DatabaseSettings:
    """Get cached database settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return DatabaseSettings()


@lru_cache
def get_iam_settings() -> IAMSettings:
    """Get cached IAM settings."""
    return IAMSettings()

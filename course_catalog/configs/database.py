"""
Database connection settings (POSTGRES_* variables).

POSTGRES_URL short-circuits the individual parts; the test suite and
local development point it at sqlite+aiosqlite.

Dependencies: pydantic_settings
System role: Engine configuration
"""

from pydantic import Field

from course_catalog.configs.base import BaseSettings, settings_config


class DatabaseSettings(BaseSettings):
    """Connection target and pool sizing for the course database."""

    model_config = settings_config("POSTGRES_")

    host: str = "localhost"
    port: int = 5432
    user: str = "postgres"
    password: str = "postgres"
    db: str = "coursecatalog"
    sslmode: str = Field(default="disable", description="'require' adds ?ssl=require for asyncpg")

    pool_size: int = 10
    max_overflow: int = 20
    pool_timeout: int = Field(default=30, description="Seconds to wait for a pooled connection")
    echo_sql: bool = False

    url: str | None = Field(default=None, description="Complete async URL, overrides the parts above")

    @property
    def async_database_url(self) -> str:
        """SQLAlchemy URL for the async engine (asyncpg unless url says otherwise)."""
        if self.url:
            return self.url
        dsn = f"postgresql+asyncpg://{self.user}:{self.password}@{self.host}:{self.port}/{self.db}"
        return f"{dsn}?ssl=require" if self.sslmode == "require" else dsn

    @property
    def is_sqlite(self) -> bool:
        return self.async_database_url.startswith("sqlite")

"""
Settings root.

Every settings class reads .env plus the process environment, ignores
unknown keys, and shares the application-wide fields below.

Dependencies: pydantic_settings
"""

from pydantic import Field
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict

ENV_FILE = ".env"


def settings_config(env_prefix: str = "") -> SettingsConfigDict:
    """Shared model_config, optionally scoped to an env var prefix."""
    return SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        env_prefix=env_prefix,
        case_sensitive=False,
        extra="ignore",
    )


class BaseSettings(PydanticBaseSettings):
    """Fields every deployment sets: where it runs, how loud, where mounted."""

    model_config = settings_config()

    environment: str = Field(default="development", description="development, staging or production")
    log_level: str = Field(default="INFO", description="Root logger level name")
    api_prefix: str = Field(default="/api/v1", description="Mount point of the HTTP routers")

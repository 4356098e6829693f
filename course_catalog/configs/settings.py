"""
Application settings aggregate.

Dependencies: course_catalog.configs
System role: Single configuration object handed to the app and DI layer
"""

from functools import lru_cache

from pydantic import Field

from course_catalog.configs.base import BaseSettings
from course_catalog.configs.database import DatabaseSettings
from course_catalog.configs.validation import ValidationSettings


class Settings(BaseSettings):
    """Top-level settings; each section reads its own prefixed variables."""

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    validation: ValidationSettings = Field(default_factory=ValidationSettings)


@lru_cache
def get_settings() -> Settings:
    """Process-wide Settings, read from the environment on first call."""
    return Settings()

"""Environment-driven configuration; start from get_settings()."""

from course_catalog.configs.database import DatabaseSettings
from course_catalog.configs.settings import Settings, get_settings
from course_catalog.configs.validation import ValidationSettings

__all__ = ["DatabaseSettings", "Settings", "ValidationSettings", "get_settings"]

"""
Name-uniqueness rule settings (COURSE_VALIDATION_* variables).

Dependencies: pydantic_settings
System role: Business-rule configuration
"""

from pydantic import Field

from course_catalog.configs.base import BaseSettings, settings_config


class ValidationSettings(BaseSettings):
    """Knobs for UniqueCourseNameValidator and the name lookup."""

    model_config = settings_config("COURSE_VALIDATION_")

    pass_when_unwired: bool = Field(
        default=True,
        description="Accept every name when no course lookup is attached; false makes wiring fail loudly",
    )
    case_sensitive: bool = Field(
        default=True,
        description="False treats 'Algebra' and 'ALGEBRA' as the same name",
    )

"""Dependency providers for the API routers."""

from .dependencies import (
    get_course_name_validator,
    get_course_repository,
    get_course_service,
    get_settings_dependency,
)

__all__ = [
    "get_course_name_validator",
    "get_course_repository",
    "get_course_service",
    "get_settings_dependency",
]

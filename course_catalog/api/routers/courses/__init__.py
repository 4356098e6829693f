"""
Courses router package.

Course CRUD endpoints, request validation helpers, and error mapping.
"""

from .courses_router import router

__all__ = ["router"]

"""
HTTP surface of the course catalog.

api_router bundles every router; create_app() in main.py mounts it
under Settings.api_prefix.
"""

from fastapi import APIRouter

from .routers import courses_router, health_router

api_router = APIRouter()
for _router in (health_router, courses_router):
    api_router.include_router(_router)

__all__ = ["api_router"]

"""HTTP routers, mounted by course_catalog.api.api_router."""

from .courses import router as courses_router
from .health import router as health_router

__all__ = ["courses_router", "health_router"]

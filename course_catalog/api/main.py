"""
ASGI application.

    uvicorn course_catalog.api.main:app
    python -m course_catalog.api.main

Dependencies: fastapi, uvicorn, course_catalog.observability
System role: Application factory and server entry point
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from course_catalog import __version__
from course_catalog.boundary.db.connection import get_async_engine
from course_catalog.configs import get_settings
from course_catalog.observability.logger import configure_logging
from course_catalog.observability.middleware import RequestLoggingMiddleware

from . import api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(
        "Course catalog starting",
        extra={
            "environment": settings.environment,
            "pass_when_unwired": settings.validation.pass_when_unwired,
            "case_sensitive_names": settings.validation.case_sensitive,
        },
    )
    yield
    await get_async_engine().dispose()
    logger.info("Course catalog stopped")


def create_app() -> FastAPI:
    """Build the app: CORS, request logging, and every router under api_prefix."""
    app = FastAPI(
        title="Course Catalog API",
        description="Courses whose active names are unique",
        version=__version__,
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.include_router(api_router, prefix=get_settings().api_prefix)
    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run("course_catalog.api.main:app", host="0.0.0.0", port=8000)

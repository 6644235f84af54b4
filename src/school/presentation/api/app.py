"""School API application factory.

Resource routes live under /api/v1. /health and / stay unversioned so
load balancers and humans can find them without knowing the version.

Run with ``uvicorn --factory school.presentation.api.app:create_app``.
"""

import logging
import sys
import time
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator, Awaitable, Callable

from fastapi import APIRouter, FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import AsyncEngine

from school.infrastructure.persistence.sqlalchemy.init_db import create_tables
from school.presentation.api.dependencies import get_engine
from school.presentation.api.exception_handlers import setup_exception_handlers
from school.presentation.api.routers import (
    auth_router,
    courses_router,
    enrollments_router,
    students_router,
    teachers_router,
)
from school_config.settings import Settings, get_settings


LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_QUIET_LOGGERS = (
    "httpx",
    "httpcore",
    "sqlalchemy.engine",
    "aiosqlite",
    "uvicorn.access",
)


@lru_cache(maxsize=None)
def _configure_logging(log_level_name: str) -> None:
    """Route all logs to stdout once per level.

    The school packages log at ``log_level_name``; HTTP and database
    libraries are held at WARNING.
    """
    log_level = getattr(logging, log_level_name.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    for name in ("school", "school_identity"):
        logging.getLogger(name).setLevel(log_level)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


logger = logging.getLogger(__name__)
request_logger = logging.getLogger("school.presentation.api.requests")

# API version info
API_VERSION = "1.0.0"
API_V1_PREFIX = "/api/v1"

OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": """User registration and login.

- Register with username, email and password (role defaults to Student)
- Login returns a JWT bearer token
- Write endpoints require `Authorization: Bearer <token>`
""",
    },
    {
        "name": "Students",
        "description": "Student profiles. A profile extends exactly one user.",
    },
    {
        "name": "Teachers",
        "description": """Teacher profiles.

A teacher cannot be deleted while courses are still assigned to them.
""",
    },
    {
        "name": "Courses",
        "description": """Courses taught by a teacher.

A course cannot be deleted while students are enrolled in it.
""",
    },
    {
        "name": "Enrollments",
        "description": """Students enrolled in courses, and their grades.

**Rules:**
- A student can be enrolled in a course only once
- The enrollment date cannot lie in the future
- Grades range from 0 to 100 inclusive
""",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
    {
        "name": "Info",
        "description": "API information and discovery.",
    },
]


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    """Create missing tables on startup and release the pool on shutdown."""
    logger.info("School API v%s starting", API_VERSION)
    engine = get_engine()
    await _prepare_schema(engine)
    try:
        yield
    finally:
        await engine.dispose()
        logger.info("School API stopped, connection pool disposed")


async def _prepare_schema(engine: AsyncEngine) -> None:
    # Doubles as the startup connectivity check
    try:
        await create_tables(engine)
    except OSError as e:
        logger.critical("Database unreachable: %s", e)
        raise SystemExit(1) from e


def create_v1_router() -> APIRouter:
    """Create the v1 API router with all endpoints.

    Returns
    -------
    APIRouter with all v1 endpoints mounted.
    """
    v1_router = APIRouter()

    v1_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
    v1_router.include_router(students_router, prefix="/students", tags=["Students"])
    v1_router.include_router(teachers_router, prefix="/teachers", tags=["Teachers"])
    v1_router.include_router(courses_router, prefix="/courses", tags=["Courses"])
    v1_router.include_router(
        enrollments_router,
        prefix="/enrollments",
        tags=["Enrollments"],
    )

    return v1_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    # Configure logging on app creation (not on module import)
    _configure_logging(settings.log_level)

    app_name = settings.app_name
    docs_enabled = settings.api_debug or settings.debug

    app = FastAPI(
        title=f"{app_name} API",
        description=(
            "Manage **students**, **teachers**, **courses** and "
            "**enrollments** with JWT authentication."
        ),
        version=API_VERSION,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        started = time.perf_counter()
        request_logger.info(
            "Incoming request: %s %s from %s",
            request.method,
            request.url.path,
            request.client.host if request.client else "unknown",
        )
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            request_logger.info(
                "Outgoing response: %s %s responded %d in %.1fms",
                request.method,
                request.url.path,
                status_code,
                (time.perf_counter() - started) * 1000,
            )

    # Register domain exception handlers for consistent error responses
    setup_exception_handlers(app)

    # Include versioned API router
    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    # Health check endpoint (unversioned - always accessible)
    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        """Health check endpoint.

        Returns service status and version info.
        """
        return {
            "status": "healthy",
            "version": API_VERSION,
            "api_versions": ["v1"],
        }

    # Root endpoint with API info
    @app.get("/", tags=["Info"])
    async def root() -> dict:
        """API root endpoint with version information."""
        return {
            "name": f"{app_name} API",
            "version": API_VERSION,
            "docs": "/docs" if docs_enabled else None,
            "api_base": API_V1_PREFIX,
            "endpoints": {
                "health": "/health",
                "auth": f"{API_V1_PREFIX}/auth",
                "students": f"{API_V1_PREFIX}/students",
                "teachers": f"{API_V1_PREFIX}/teachers",
                "courses": f"{API_V1_PREFIX}/courses",
                "enrollments": f"{API_V1_PREFIX}/enrollments",
            },
        }

    return app

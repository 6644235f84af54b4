"""REST API presentation layer for the school backend.

This package provides a FastAPI-based REST API for the school application.

Structure:
    api/
    ├── app.py                # FastAPI application factory
    ├── config.py             # API configuration
    ├── dependencies.py       # Dependency injection
    ├── exception_handlers.py # Domain exception to HTTP mapping
    ├── routers/              # API route handlers
    └── schemas/              # Pydantic request/response schemas
"""

from school.presentation.api.app import create_app

__all__ = ["create_app"]

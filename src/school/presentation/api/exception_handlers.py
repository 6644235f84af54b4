"""Translate domain exceptions into JSON error responses.

Every error body has the same two fields::

    {"detail": "<message for humans>", "code": "<ErrorCode value>"}

The status comes from the exception class when it is one of the generic
families (validation, not found, conflict) and from ``ERROR_CODE_TO_STATUS``
otherwise.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from school.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)

logger = logging.getLogger(__name__)

_BAD_REQUEST = status.HTTP_400_BAD_REQUEST
_NOT_FOUND = status.HTTP_404_NOT_FOUND
_CONFLICT = status.HTTP_409_CONFLICT

ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    ErrorCode.VALIDATION_ERROR: _BAD_REQUEST,
    ErrorCode.INVALID_EMAIL: _BAD_REQUEST,
    ErrorCode.INVALID_DATE: _BAD_REQUEST,
    ErrorCode.INVALID_REFERENCE: _BAD_REQUEST,
    ErrorCode.OUT_OF_RANGE: _BAD_REQUEST,
    ErrorCode.ENTITY_NOT_FOUND: _NOT_FOUND,
    ErrorCode.USER_NOT_FOUND: _NOT_FOUND,
    ErrorCode.STUDENT_NOT_FOUND: _NOT_FOUND,
    ErrorCode.TEACHER_NOT_FOUND: _NOT_FOUND,
    ErrorCode.COURSE_NOT_FOUND: _NOT_FOUND,
    ErrorCode.CONFLICT: _CONFLICT,
    ErrorCode.DUPLICATE_USERNAME: _CONFLICT,
    ErrorCode.DUPLICATE_EMAIL: _CONFLICT,
    ErrorCode.DUPLICATE_PROFILE: _CONFLICT,
    ErrorCode.ALREADY_ENROLLED: _CONFLICT,
    ErrorCode.COURSE_HAS_ENROLLMENTS: _CONFLICT,
    ErrorCode.TEACHER_HAS_COURSES: _CONFLICT,
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

# Checked in order; the first matching family wins
_STATUS_BY_FAMILY: tuple[tuple[type[DomainException], int], ...] = (
    (EntityNotFoundError, _NOT_FOUND),
    (ConflictError, _CONFLICT),
    (ValidationError, _BAD_REQUEST),
)


def status_for(exc: DomainException) -> int:
    """HTTP status for a domain exception, 400 when nothing matches."""
    for family, status_code in _STATUS_BY_FAMILY:
        if isinstance(exc, family):
            return status_code
    return ERROR_CODE_TO_STATUS.get(exc.code, _BAD_REQUEST)


def _error_body(status_code: int, detail: str, code: ErrorCode) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"detail": detail, "code": code.value},
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Install the domain and catch-all handlers on ``app``."""

    @app.exception_handler(DomainException)
    async def handle_domain_exception(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        status_code = status_for(exc)
        logger.warning(
            "%s %s failed with %s: %s (details=%s)",
            request.method,
            request.url.path,
            exc.code.value,
            exc.message,
            exc.details,
        )
        return _error_body(status_code, exc.message, exc.code)

    @app.exception_handler(Exception)
    async def handle_unexpected_exception(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        # The stack trace stays in the log; clients get a generic message
        logger.exception(
            "Unhandled error on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return _error_body(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "An internal error occurred",
            ErrorCode.INTERNAL_ERROR,
        )

"""FastAPI dependency injection for the school API.

Provides dependencies for:
- Database sessions and the unit of work
- Authentication (current user from JWT)
- Application service instances
"""

import logging
from functools import lru_cache
from typing import Annotated, AsyncGenerator

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from school.application.services import (
    AuthenticationService,
    CourseService,
    EnrollmentService,
    StudentService,
    TeacherService,
)
from school.infrastructure.persistence.sqlalchemy.init_db import ensure_sqlite_directory
from school.infrastructure.persistence.sqlalchemy.unit_of_work import (
    UnitOfWorkSQLAlchemy,
)
from school.presentation.api.config import get_api_settings
from school_config.settings import Settings, get_settings
from school_identity import InvalidTokenError, JWTService, PasswordHashingService, User

logger = logging.getLogger(__name__)

# Security scheme for JWT Bearer tokens
security = HTTPBearer(auto_error=False)


# -----------------------------------------------------------------------------
# Engine & sessions
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """Process-wide engine; its pool is shared by all requests."""
    settings = get_settings()
    ensure_sqlite_directory(settings.database_url)
    return create_async_engine(
        settings.database_url,
        echo=settings.database_echo,
        pool_pre_ping=True,
    )


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(get_engine(), expire_on_commit=False)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Yield one session per request, closed when the response is sent."""
    async with get_session_maker()() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


def get_unit_of_work(session: DBSession) -> UnitOfWorkSQLAlchemy:
    """Get the request-scoped unit of work."""
    return UnitOfWorkSQLAlchemy(session)


UnitOfWorkDep = Annotated[UnitOfWorkSQLAlchemy, Depends(get_unit_of_work)]


# -----------------------------------------------------------------------------
# Authentication Services
# -----------------------------------------------------------------------------


def get_jwt_service(
    settings: Settings = Depends(get_api_settings),
) -> JWTService:
    """Get JWT service configured with API settings."""
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
        expire_minutes=settings.jwt_expiry_minutes,
    )


def get_password_service(
    settings: Settings = Depends(get_api_settings),
) -> PasswordHashingService:
    """Get password hashing service."""
    return PasswordHashingService(iterations=settings.password_hash_iterations)


def get_authentication_service(
    unit_of_work: UnitOfWorkDep,
    jwt_service: JWTService = Depends(get_jwt_service),
    password_service: PasswordHashingService = Depends(get_password_service),
) -> AuthenticationService:
    """
    Get authentication service with all dependencies.

    This service orchestrates user registration, login, and availability checks.
    """
    return AuthenticationService(
        unit_of_work=unit_of_work,
        password_service=password_service,
        jwt_service=jwt_service,
    )


# Type alias for injected auth service
AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]


# -----------------------------------------------------------------------------
# Current User (JWT Authentication)
# -----------------------------------------------------------------------------


async def get_current_user(
    unit_of_work: UnitOfWorkDep,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> User:
    """
    FastAPI dependency to get the current authenticated user from JWT.

    Extracts and validates the JWT token from the Authorization header,
    then loads the corresponding User from the database.

    Returns
    -------
    The authenticated User

    Raises
    ------
    HTTPException
        401 if token is missing, invalid, or the user is unknown or inactive
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        payload = jwt_service.verify_token(credentials.credentials)
    except InvalidTokenError as e:
        logger.warning("Invalid token: %s", e)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        ) from e

    user = await unit_of_work.users.find_by_id(payload.user_id)

    if user is None or not user.is_active:
        logger.warning("User not found or inactive for token: %s", payload.user_id)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return user


# Type alias for injected current user
CurrentUser = Annotated[User, Depends(get_current_user)]


# -----------------------------------------------------------------------------
# Application Services
# -----------------------------------------------------------------------------


def get_student_service(unit_of_work: UnitOfWorkDep) -> StudentService:
    return StudentService(unit_of_work)


def get_teacher_service(unit_of_work: UnitOfWorkDep) -> TeacherService:
    return TeacherService(unit_of_work)


def get_course_service(unit_of_work: UnitOfWorkDep) -> CourseService:
    return CourseService(unit_of_work)


def get_enrollment_service(unit_of_work: UnitOfWorkDep) -> EnrollmentService:
    return EnrollmentService(unit_of_work)


StudentServiceDep = Annotated[StudentService, Depends(get_student_service)]
TeacherServiceDep = Annotated[TeacherService, Depends(get_teacher_service)]
CourseServiceDep = Annotated[CourseService, Depends(get_course_service)]
EnrollmentServiceDep = Annotated[EnrollmentService, Depends(get_enrollment_service)]

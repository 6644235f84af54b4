"""Authentication router for user registration, login and availability checks."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from school.presentation.api.dependencies import (
    AuthService,
    CurrentUser,
    get_jwt_service,
)
from school.presentation.api.schemas.auth import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    UserResponse,
)
from school.presentation.api.schemas.common import ExistsResponse
from school_identity import AuthResult, JWTService

logger = logging.getLogger(__name__)

router = APIRouter()

JWTServiceDep = Annotated[JWTService, Depends(get_jwt_service)]


def _create_auth_response(result: AuthResult, jwt_service: JWTService) -> AuthResponse:
    return AuthResponse(
        token=result.token,
        expires_in=jwt_service.expire_seconds,
        username=result.username,
        email=result.email,
        role=result.role.value,
    )


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        201: {"description": "User registered successfully"},
        400: {"description": "Invalid input"},
        409: {"description": "Username or email already taken"},
    },
)
async def register(
    request: RegisterRequest,
    auth_service: AuthService,
    jwt_service: JWTServiceDep,
) -> AuthResponse:
    """
    Register a new user and return a bearer token.

    The role defaults to Student when omitted.
    """
    result = await auth_service.register(
        username=request.username,
        email=request.email,
        password=request.password,
        role=request.role,
    )
    return _create_auth_response(result, jwt_service)


@router.post(
    "/login",
    summary="Authenticate user",
    responses={
        200: {"description": "Login successful"},
        401: {"description": "Invalid credentials"},
    },
)
async def login(
    request: LoginRequest,
    auth_service: AuthService,
    jwt_service: JWTServiceDep,
) -> AuthResponse:
    """Authenticate with username and password."""
    result = await auth_service.login(request.username, request.password)

    if result is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return _create_auth_response(result, jwt_service)


@router.get(
    "/username-exists/{username}",
    summary="Check username availability",
)
async def username_exists(username: str, auth_service: AuthService) -> ExistsResponse:
    return ExistsResponse(exists=await auth_service.username_exists(username))


@router.get(
    "/email-exists/{email}",
    summary="Check email availability",
)
async def email_exists(email: str, auth_service: AuthService) -> ExistsResponse:
    return ExistsResponse(exists=await auth_service.email_exists(email))


@router.get(
    "/me",
    summary="Get current user",
    responses={
        200: {"description": "Current user info"},
        401: {"description": "Not authenticated"},
    },
)
async def get_current_user_info(current_user: CurrentUser) -> UserResponse:
    """Get information about the currently authenticated user."""
    return UserResponse(
        id=current_user.id,
        username=current_user.username,
        email=current_user.email,
        role=current_user.role.value,
        is_active=current_user.is_active,
        created_at=current_user.created_at,
    )

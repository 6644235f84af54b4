"""Authentication schemas for request/response models."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from school_identity import UserRole


class RegisterRequest(BaseModel):
    """Request schema for user registration."""

    username: str = Field(..., description="Login name (3-50 characters)")
    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(
        ...,
        min_length=6,
        max_length=100,
        description="Password (6-100 characters)",
    )
    role: Optional[UserRole] = Field(
        default=None,
        description="Role of the new user (defaults to Student)",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "alice",
                "email": "alice@example.com",
                "password": "secret1",
            },
        },
    )


class LoginRequest(BaseModel):
    """Request schema for user login."""

    username: str
    password: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "alice",
                "password": "secret1",
            },
        },
    )


class AuthResponse(BaseModel):
    """Response schema for a successful registration or login."""

    token: str = Field(..., description="JWT bearer token")
    token_type: str = Field(default="bearer")
    expires_in: int = Field(..., description="Token lifetime in seconds")
    username: str
    email: str
    role: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                "token_type": "bearer",
                "expires_in": 3600,
                "username": "alice",
                "email": "alice@example.com",
                "role": "Student",
            },
        },
    )


class UserResponse(BaseModel):
    """Response schema for user data."""

    id: UUID
    username: str
    email: str
    role: str
    is_active: bool
    created_at: datetime

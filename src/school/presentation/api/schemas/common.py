"""Common schemas shared across API endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    detail: str = Field(..., description="Error message")
    code: str | None = Field(None, description="Error code for programmatic handling")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "detail": "Grade must be between 0 and 100",
                "code": "OUT_OF_RANGE",
            },
        },
    )


class ExistsResponse(BaseModel):
    """Response schema for existence checks."""

    exists: bool = Field(..., description="True if the resource exists")


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="API version")

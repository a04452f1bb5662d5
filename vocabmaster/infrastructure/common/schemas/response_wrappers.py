"""Common response wrapper schemas for API responses."""

from pydantic import BaseModel, Field


class SuccessResponse(BaseModel):
    """Generic success response wrapper."""

    success: bool = Field(..., description="Whether the operation succeeded")
    message: str = Field(..., description="Response message")

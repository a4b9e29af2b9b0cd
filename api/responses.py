"""
Standardized API response models.
"""

from typing import Optional
from pydantic import BaseModel, Field
from datetime import datetime, timezone


class SuccessResponse(BaseModel):
    """Acknowledgement for operations that return no resource"""

    success: bool = Field(True, description="Indicates if the operation was successful")


class ErrorResponse(BaseModel):
    """Standardized error response"""

    success: bool = Field(False, description="Always false for errors")
    error: str = Field(..., description="Human-readable error message")


class HealthResponse(BaseModel):
    """Health check response"""

    status: str = Field(..., description="Service status")
    service: str = Field(..., description="Service name")
    version: Optional[str] = Field(None, description="Service version")
    database: str = Field(..., description="Database connectivity")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Check timestamp",
    )


def error_body(message: str) -> dict:
    """Body shared by every error handler"""
    return {"success": False, "error": message}

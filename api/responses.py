"""
Standardized API response models and utilities.
Provides consistent response formatting across all endpoints.
"""

from typing import Generic, TypeVar, Optional, Any
from pydantic import BaseModel, Field
from datetime import datetime, timezone

T = TypeVar("T")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class APIResponse(BaseModel, Generic[T]):
    """Generic API response wrapper"""

    success: bool = Field(..., description="Indicates if the operation was successful")
    message: Optional[str] = Field(None, description="Human-readable message")
    data: Optional[T] = Field(None, description="Response payload")
    timestamp: datetime = Field(
        default_factory=utcnow, description="Response timestamp"
    )


class ErrorDetail(BaseModel):
    """Detailed error information"""

    code: str = Field(..., description="Error code")
    message: str = Field(..., description="Error message")
    details: Optional[Any] = Field(None, description="Additional error details")


class ErrorResponse(BaseModel):
    """Standardized error response"""

    success: bool = Field(False, description="Always false for errors")
    error: ErrorDetail = Field(..., description="Error details")
    timestamp: datetime = Field(
        default_factory=utcnow, description="Error timestamp"
    )


class HealthResponse(BaseModel):
    """Health check response"""

    status: str = Field(..., description="Service status")
    service: str = Field(..., description="Service name")
    version: Optional[str] = Field(None, description="Service version")


def error_body(code: str, message: str, details: Any = None) -> dict:
    """Create a JSON-ready error envelope; empty details are left out"""
    response = ErrorResponse(
        error=ErrorDetail(code=code, message=message, details=details or None)
    )
    exclude = None if details else {"error": {"details"}}
    return response.model_dump(mode="json", exclude=exclude)

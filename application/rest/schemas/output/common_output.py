"""Common output schemas for API responses.

This module contains shared Pydantic models for common API responses
like error messages and status information.
"""

from typing import Any, Optional

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Schema for error responses across all endpoints.

    Attributes:
        detail (str): Detailed error message.

    Example:
        >>> ErrorResponse(detail="Note not found")
    """

    detail: str


class MessageResponse(BaseModel):
    """Schema for simple message responses.

    Attributes:
        message (str): Success or informational message.
        data (Any, optional): Additional response data.

    Example:
        >>> MessageResponse(message="Note deleted successfully", data={"id": "..."})
    """

    message: str
    data: Optional[Any] = None


class HealthResponse(BaseModel):
    """Schema for health check responses.

    Attributes:
        status (str): Service health status.
        service (str): Service name identifier.
    """

    status: str
    service: str

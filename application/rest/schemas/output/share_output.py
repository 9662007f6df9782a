"""Share output schemas for API responses."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

if TYPE_CHECKING:
    from domain.entities.share import ShareResult


class ShareEmailResponse(BaseModel):
    """Schema for the outcome of sharing a note via email.

    Attributes:
        status (str): One of "shared", "denied" or "failed".
        message (str): Human-readable status for display.

    Example:
        >>> ShareEmailResponse(status="shared", message="Note shared successfully via email!")
    """

    status: str
    message: str

    @classmethod
    def from_result(cls, result: ShareResult) -> ShareEmailResponse:
        """Create the response from a domain ShareResult.

        The internal failure reason is not included.
        """
        return cls(status=result.status.value, message=result.message)

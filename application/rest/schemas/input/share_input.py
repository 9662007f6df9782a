"""Share input schemas for API requests."""

from pydantic import BaseModel, Field


class ShareEmailRequest(BaseModel):
    """Schema for emailing a note to an address.

    Attributes:
        recipient_email (str): Address that receives the note's contents.

    Example:
        >>> share_data = ShareEmailRequest(recipient_email="friend@example.com")
    """

    recipient_email: str = Field(..., min_length=3, max_length=320)

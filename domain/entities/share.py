"""Share domain entities for the diary application.

This module contains the tagged result returned by the note sharing
handler and the value object describing the outgoing email.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from domain.entities.note import Note

SHARED_MESSAGE = "Note shared successfully via email!"
DENIED_MESSAGE = "Note not found or you don't have permission to share it."
FAILED_MESSAGE = "An error occurred while sharing the note."


class ShareStatus(Enum):
    """Outcome classes of a share invocation."""

    SHARED = "shared"
    DENIED = "denied"
    FAILED = "failed"


@dataclass(frozen=True)
class ShareResult:
    """Tagged result of sharing a note via email.

    Callers branch on ``status``; ``message`` is only for display. The
    ``reason`` of a failure is kept for logging and is never rendered.

    Attributes:
        status (ShareStatus): Outcome class of the invocation.
        reason (Optional[str]): Internal failure reason, FAILED only.

    Example:
        >>> ShareResult.denied().message
        "Note not found or you don't have permission to share it."
    """

    status: ShareStatus
    reason: Optional[str] = None

    @classmethod
    def shared(cls) -> "ShareResult":
        return cls(status=ShareStatus.SHARED)

    @classmethod
    def denied(cls) -> "ShareResult":
        return cls(status=ShareStatus.DENIED)

    @classmethod
    def failed(cls, reason: str) -> "ShareResult":
        return cls(status=ShareStatus.FAILED, reason=reason)

    @property
    def message(self) -> str:
        """Human-readable status string for the caller."""
        if self.status is ShareStatus.SHARED:
            return SHARED_MESSAGE
        if self.status is ShareStatus.DENIED:
            return DENIED_MESSAGE
        return FAILED_MESSAGE

    def is_shared(self) -> bool:
        return self.status is ShareStatus.SHARED


@dataclass(frozen=True)
class ShareEmail:
    """Plain-text email carrying a note's contents.

    Attributes:
        recipient (str): Destination address.
        subject (str): Email subject line.
        text_body (str): Plain-text body with the note's title and content.
    """

    recipient: str
    subject: str
    text_body: str

    def __post_init__(self):
        if not self.recipient or not self.recipient.strip():
            raise ValueError("Recipient email cannot be empty")

    @classmethod
    def from_note(cls, note: Note, recipient: str, subject: str) -> "ShareEmail":
        """Format a note as the body of a plain-text email.

        Args:
            note (Note): The note to forward. Title and content are copied verbatim.
            recipient (str): Destination address.
            subject (str): Subject line.

        Returns:
            ShareEmail: Email ready to be dispatched.
        """
        return cls(
            recipient=recipient,
            subject=subject,
            text_body=f"Title: {note.title}\n\nContent: {note.content}",
        )

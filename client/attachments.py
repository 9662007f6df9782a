"""Attachment payloads and storage key generation."""

from dataclasses import dataclass
from uuid import uuid4

AUDIO_CONTENT_TYPE = "audio/webm"
AUDIO_EXTENSION = "webm"
DEFAULT_CONTENT_TYPE = "application/octet-stream"


@dataclass(frozen=True)
class AttachmentUpload:
    """Bytes of a file about to be attached to a note.

    Attributes:
        data (bytes): File content.
        filename (str): Original file name; its extension is kept in the key.
        content_type (str): MIME type sent to object storage.
    """

    data: bytes
    filename: str
    content_type: str = DEFAULT_CONTENT_TYPE

    @classmethod
    def audio_clip(cls, data: bytes) -> "AttachmentUpload":
        """Wrap a captured audio recording."""
        return cls(
            data=data,
            filename=f"recording.{AUDIO_EXTENSION}",
            content_type=AUDIO_CONTENT_TYPE,
        )

    @property
    def extension(self) -> str:
        """Text after the last dot of the file name, or the whole name without one."""
        return self.filename.rsplit(".", 1)[-1]


def build_attachment_key(upload: AttachmentUpload) -> str:
    """Generate a fresh, unique storage key for ``upload``.

    Example:
        >>> build_attachment_key(AttachmentUpload(b"...", "beach.jpg", "image/jpeg"))
        '0b6f6a1e-....jpg'
    """
    return f"{uuid4()}.{upload.extension}"

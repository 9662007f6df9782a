"""Note input schemas for API requests.

This module contains Pydantic models for note-related API requests.
"""

from typing import Optional

from pydantic import BaseModel, Field


class NoteCreate(BaseModel):
    """Schema for creating a new diary note.

    Attachment keys must point at blobs the client already uploaded to
    object storage; the service stores the references as given.

    Attributes:
        title (str): The title of the note.
        content (str): The content/body of the note.
        image_key (str, optional): Storage key of an uploaded image.
        audio_key (str, optional): Storage key of an uploaded audio clip.

    Example:
        >>> note_data = NoteCreate(
        ...     title="Sunday",
        ...     content="Walked to the lake",
        ...     image_key="3f1c...e2.jpg",
        ... )
    """

    title: str
    content: str
    image_key: Optional[str] = Field(default=None, max_length=255)
    audio_key: Optional[str] = Field(default=None, max_length=255)

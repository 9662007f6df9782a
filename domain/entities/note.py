"""Note domain entity for the diary application.

This module contains the core Note domain entity representing
a diary entry in the system following Domain-Driven Design principles.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import uuid4

TITLE_MAX_LENGTH = 255


@dataclass
class Note:
    """Domain entity representing a diary note.

    Attributes:
        id (str): Unique identifier for the note, assigned at creation.
        owner (str): Identity of the user who created the note.
        title (str): Title of the note.
        content (str): Content/body of the note.
        image_key (Optional[str]): Object storage key of the image attachment.
        audio_key (Optional[str]): Object storage key of the audio attachment.
        created_at (datetime): Timestamp when the note was created.
        updated_at (datetime): Timestamp when the note was last updated.
    """

    id: str
    owner: str
    title: str
    content: str
    created_at: datetime
    updated_at: datetime
    image_key: Optional[str] = None
    audio_key: Optional[str] = None

    def __post_init__(self):
        """Validate note after initialization.

        Raises:
            ValueError: If note title or content are empty, or title is too long.
        """
        if not self.title or not self.title.strip():
            raise ValueError("Note title cannot be empty")
        if not self.content or not self.content.strip():
            raise ValueError("Note content cannot be empty")
        if len(self.title) > TITLE_MAX_LENGTH:
            raise ValueError(
                f"Note title cannot exceed {TITLE_MAX_LENGTH} characters"
            )

    @classmethod
    def create_new(
        cls,
        title: str,
        content: str,
        owner: str,
        image_key: Optional[str] = None,
        audio_key: Optional[str] = None,
    ) -> "Note":
        """Factory method to create a new note with default values.

        Args:
            title (str): Title of the note.
            content (str): Content of the note.
            owner (str): Identity of the note owner.
            image_key (Optional[str]): Key of an already uploaded image.
            audio_key (Optional[str]): Key of an already uploaded audio clip.

        Returns:
            Note: New note instance with generated id and timestamps.

        Raises:
            ValueError: If title or content are empty.
        """
        if not owner:
            raise ValueError("Note owner is required")

        now = datetime.utcnow()
        return cls(
            id=str(uuid4()),
            owner=owner,
            title=(title or "").strip(),
            content=(content or "").strip(),
            created_at=now,
            updated_at=now,
            image_key=image_key or None,
            audio_key=audio_key or None,
        )

    def is_owned_by(self, caller: str) -> bool:
        """Check if the note is owned by the specified caller.

        Args:
            caller (str): Identity of the caller to check ownership for.

        Returns:
            bool: True if the caller owns the note, False otherwise.
        """
        return bool(caller) and self.owner == caller

    def has_attachments(self) -> bool:
        """Check whether the note references any stored blob."""
        return self.image_key is not None or self.audio_key is not None

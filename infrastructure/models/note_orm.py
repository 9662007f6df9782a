"""SQLAlchemy ORM model for Note entity.

This module contains the NoteORM class that defines the database schema
for diary notes and handles note data persistence.

Architecture:
    This ORM model is part of the Infrastructure layer and should only be used by:
    - SqlAlchemyNoteRepository implementation
    - Database bootstrap code

    Domain code should use the Note entity instead of this ORM model.
"""

import uuid
from datetime import datetime

from infrastructure.models.base import Base
from sqlalchemy import Column, DateTime, Index, String, Text


def _new_note_id() -> str:
    return str(uuid.uuid4())


class NoteORM(Base):
    """SQLAlchemy ORM model for diary notes with optional attachments.

    Attributes:
        id (str): Primary key, UUID4 text.
        owner (str): Identity of the user who created the note.
        title (str): Note title, max 255 characters.
        content (str): Note content, unlimited text.
        image_key (str): Object storage key of the image attachment, nullable.
        audio_key (str): Object storage key of the audio attachment, nullable.
        created_at (datetime): Timestamp when note was created.
        updated_at (datetime): Timestamp when note was last updated.

    Table Schema:
        - Table name: 'notes'
        - Primary key: id
        - Indexes: (owner, created_at) for owner-scoped listing

    Example:
        >>> note_orm = NoteORM(title="Monday", content="Rain again", owner="alice")
        >>> db.add(note_orm)
        >>> db.commit()
    """

    __tablename__ = "notes"
    __table_args__ = (Index("ix_notes_owner_created_at", "owner", "created_at"),)

    id = Column(
        String(36),
        primary_key=True,
        default=_new_note_id,
        comment="Primary key, UUID4 text",
    )

    owner = Column(
        String(255), nullable=False, comment="Identity of the user who owns the note"
    )

    title = Column(
        String(255), nullable=False, comment="Note title, max 255 characters"
    )

    content = Column(Text, nullable=False, comment="Note content, unlimited text")

    # Attachment references into the object store
    image_key = Column(String(255), nullable=True, comment="Image attachment key")
    audio_key = Column(String(255), nullable=True, comment="Audio attachment key")

    created_at = Column(
        DateTime,
        default=datetime.utcnow,
        nullable=False,
        comment="Timestamp when note was created",
    )

    updated_at = Column(
        DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
        nullable=False,
        comment="Timestamp when note was last updated",
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<NoteORM(id={self.id}, title='{self.title}', owner='{self.owner}')>"

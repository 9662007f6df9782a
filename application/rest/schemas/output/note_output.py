"""Note output schemas for API responses.

This module contains Pydantic models for note-related API responses,
including single notes, pagination info, and note lists.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, List, Optional

from pydantic import BaseModel

if TYPE_CHECKING:
    from domain.entities.note import Note
    from domain.entities.pagination import PaginationMetadata


class NoteResponse(BaseModel):
    """Schema for note data in API responses.

    Attributes:
        id (str): Identifier of the note.
        owner (str): Identity of the note owner.
        title (str): The title of the note.
        content (str): The content/body of the note.
        image_key (str, optional): Storage key of the image attachment.
        audio_key (str, optional): Storage key of the audio attachment.
        created_at (datetime): Timestamp when the note was created.
        updated_at (datetime): Timestamp when the note was last updated.
    """

    id: str
    owner: str
    title: str
    content: str
    image_key: Optional[str] = None
    audio_key: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, note: Note) -> NoteResponse:
        """Create NoteResponse from Note domain entity."""
        return cls(
            id=note.id,
            owner=note.owner,
            title=note.title,
            content=note.content,
            image_key=note.image_key,
            audio_key=note.audio_key,
            created_at=note.created_at,
            updated_at=note.updated_at,
        )


class PaginationInfo(BaseModel):
    """Schema for pagination metadata in API responses.

    Attributes:
        current_page (int): Current page number (1-indexed).
        total_pages (int): Total number of pages available.
        total_notes (int): Total number of notes across all pages.
        notes_per_page (int): Number of notes per page.
        has_next (bool): Whether there is a next page available.
        has_previous (bool): Whether there is a previous page available.
    """

    current_page: int
    total_pages: int
    total_notes: int
    notes_per_page: int
    has_next: bool
    has_previous: bool

    @classmethod
    def from_entity(cls, pagination_metadata: PaginationMetadata) -> PaginationInfo:
        """Convert domain PaginationMetadata to API response PaginationInfo."""
        return cls(
            current_page=pagination_metadata.current_page,
            total_pages=pagination_metadata.total_pages,
            total_notes=pagination_metadata.total_notes,
            notes_per_page=pagination_metadata.notes_per_page,
            has_next=pagination_metadata.has_next,
            has_previous=pagination_metadata.has_previous,
        )


class NotesListResponse(BaseModel):
    """Schema for paginated notes list API responses.

    Attributes:
        notes (List[NoteResponse]): List of notes for the current page.
        pagination (PaginationInfo): Pagination metadata.
    """

    notes: List[NoteResponse]
    pagination: PaginationInfo

    @classmethod
    def from_entities(
        cls, notes: List[Note], pagination: PaginationMetadata
    ) -> NotesListResponse:
        """Build the list response from domain notes and pagination metadata."""
        return cls(
            notes=[NoteResponse.from_entity(note) for note in notes],
            pagination=PaginationInfo.from_entity(pagination),
        )

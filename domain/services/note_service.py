"""Note domain service for the diary application.

This module contains the NoteService that orchestrates note operations
following Domain-Driven Design principles.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional, Tuple

from domain.entities.note import Note
from domain.entities.pagination import PaginationMetadata
from domain.policies.ownership import caller_owns_note

if TYPE_CHECKING:
    from domain.repositories.note_repository import NoteRepository
    from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

MAX_PAGE_SIZE = 100


class NoteError(Exception):
    """Base exception for note-related errors."""

    pass


class NoteNotFoundError(NoteError):
    """Exception raised when a note is not found or not visible to the caller."""

    pass


class NoteService:
    """Domain service for handling note operations.

    This service encapsulates the business logic for the diary note
    lifecycle: create, list, read and delete, all scoped to the owner.
    """

    def __init__(self, note_repository: "NoteRepository"):
        """Initialize the note service with dependencies.

        Args:
            note_repository: Repository for performing note operations
        """
        self._note_repository = note_repository

    async def create_note(
        self,
        db_session: "Session",
        owner: str,
        title: str,
        content: str,
        image_key: Optional[str] = None,
        audio_key: Optional[str] = None,
    ) -> Note:
        """Create a new note with business logic validation.

        Attachment keys must reference blobs that were already uploaded.

        Args:
            db_session: Database session for this operation
            owner: Identity of the caller, recorded as the note owner
            title: Note title
            content: Note content
            image_key: Optional key of the image attachment
            audio_key: Optional key of the audio attachment

        Returns:
            Note: Created note with assigned ID

        Raises:
            ValueError: If title or content are invalid
            NoteError: If creation fails
        """
        logger.info(f"Creating note for user {owner}")

        try:
            note = Note.create_new(
                title=title,
                content=content,
                owner=owner,
                image_key=image_key,
                audio_key=audio_key,
            )

            created_note = await self._note_repository.create_note(db_session, note)

            logger.info(f"Successfully created note {created_note.id}")
            return created_note

        except ValueError as e:
            logger.warning(f"Invalid note data: {str(e)}")
            raise
        except Exception as e:
            logger.error(f"Failed to create note: {str(e)}")
            raise NoteError(f"Failed to create note: {str(e)}")

    async def get_note(self, db_session: "Session", note_id: str, caller: str) -> Note:
        """Get a note by ID with access control.

        A missing note and a note owned by someone else raise the same error.

        Args:
            db_session: Database session for this operation
            note_id: Identifier of the note to retrieve
            caller: Identity of the user requesting the note

        Returns:
            Note: Retrieved note

        Raises:
            NoteNotFoundError: If note not found or user doesn't own it
            NoteError: If retrieval fails
        """
        logger.info(f"Getting note {note_id} for user {caller}")

        try:
            note = await self._note_repository.get_note_by_id(db_session, note_id)
        except Exception as e:
            logger.error(f"Failed to get note {note_id}: {str(e)}")
            raise NoteError(f"Failed to retrieve note: {str(e)}")

        if not caller_owns_note(caller, note):
            raise NoteNotFoundError(f"Note {note_id} not found")

        return note

    async def list_notes_paginated(
        self, db_session: "Session", owner: str, page: int, limit: int
    ) -> Tuple[List[Note], PaginationMetadata]:
        """Get a page of the owner's notes.

        Args:
            db_session: Database session for this operation
            owner: Identity of the user
            page: Page number (1-based)
            limit: Number of notes per page

        Returns:
            Tuple containing notes and pagination metadata

        Raises:
            ValueError: If pagination parameters are invalid
            NoteError: If retrieval fails
        """
        self._validate_pagination(page, limit)

        try:
            notes, total_count = await self._note_repository.list_notes_by_owner(
                db_session, owner, page, limit
            )
        except Exception as e:
            logger.error(f"Failed to list notes: {str(e)}")
            raise NoteError(f"Failed to retrieve notes: {str(e)}")

        pagination = PaginationMetadata.calculate(
            current_page=page, total_notes=total_count, notes_per_page=limit
        )

        logger.info(f"Retrieved {len(notes)} notes for user {owner}")
        return notes, pagination

    async def delete_note(
        self, db_session: "Session", note_id: str, caller: str
    ) -> bool:
        """Delete a note after verifying ownership.

        Args:
            db_session: Database session for this operation
            note_id: Identifier of the note to delete
            caller: Identity of the user attempting deletion

        Returns:
            bool: True if deletion successful

        Raises:
            NoteNotFoundError: If note not found or user doesn't own it
            NoteError: If deletion fails
        """
        logger.info(f"Deleting note {note_id} for user {caller}")

        note = await self.get_note(db_session, note_id, caller)

        try:
            success = await self._note_repository.delete_note(
                db_session, note_id, caller
            )
        except Exception as e:
            logger.error(f"Failed to delete note {note_id}: {str(e)}")
            raise NoteError(f"Failed to delete note: {str(e)}")

        if not success:
            logger.warning(f"Note {note_id} not found for deletion")
            raise NoteNotFoundError(f"Note {note_id} not found")

        logger.info(f"Successfully deleted note {note_id}")
        if note.has_attachments():
            logger.info(f"Attachments of note {note_id} are left in storage")
        return success

    def _validate_pagination(self, page: int, limit: int) -> None:
        """Validate pagination parameters.

        Raises:
            ValueError: If parameters are invalid
        """
        if page < 1:
            raise ValueError("Page number must be at least 1")
        if limit < 1 or limit > MAX_PAGE_SIZE:
            raise ValueError(f"Limit must be between 1 and {MAX_PAGE_SIZE}")

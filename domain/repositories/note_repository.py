"""Note repository interface for the diary application.

This module defines the repository interface for note operations
following Domain-Driven Design principles.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Optional, Tuple

if TYPE_CHECKING:
    from domain.entities.note import Note
    from sqlalchemy.orm import Session


class NoteRepository(ABC):
    """Abstract repository interface for note operations.

    This interface defines the contract for the record store, allowing
    different implementations (e.g., SQLAlchemy, a document store, etc.)
    while keeping the domain layer independent of infrastructure concerns.
    """

    @abstractmethod
    async def create_note(self, db_session: Session, note: Note) -> Note:
        """Persist a new note.

        Args:
            db_session (Session): SQLAlchemy database session for this operation
            note (Note): Domain Note entity to create

        Returns:
            Note: Created note as stored

        Raises:
            Exception: If creation fails at the data layer
        """
        pass

    @abstractmethod
    async def get_note_by_id(self, db_session: Session, note_id: str) -> Optional[Note]:
        """Point lookup of a note by its identifier.

        The lookup is not scoped to any caller; callers must apply the
        ownership check before disclosing the note.

        Args:
            db_session (Session): SQLAlchemy database session for this operation
            note_id (str): Identifier of the note to retrieve

        Returns:
            Optional[Note]: Note if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_notes_by_owner(
        self, db_session: Session, owner: str, page: int, limit: int
    ) -> Tuple[List[Note], int]:
        """Get a page of the owner's notes in creation order.

        Args:
            db_session: SQLAlchemy database session for this operation
            owner: Identity of the owner
            page: Page number (1-based)
            limit: Number of notes per page

        Returns:
            Tuple[List[Note], int]: Notes and total count
        """
        pass

    @abstractmethod
    async def delete_note(self, db_session: Session, note_id: str, owner: str) -> bool:
        """Delete a note owned by ``owner``.

        Args:
            db_session: SQLAlchemy database session for this operation
            note_id: Identifier of the note to delete
            owner: Identity of the owner attempting deletion

        Returns:
            bool: True if a record was removed, False if none matched
        """
        pass

"""SQLAlchemy implementation of the note repository.

This module contains the concrete implementation of the NoteRepository
using SQLAlchemy for database operations.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from domain.entities.note import Note
from domain.entities.pagination import PaginationMetadata
from domain.repositories.note_repository import NoteRepository
from infrastructure.models.note_orm import NoteORM
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


class SqlAlchemyNoteRepository(NoteRepository):
    """SQLAlchemy implementation of the note repository.

    NOTE: This repository does not store the session internally.
    Each method receives a fresh session to ensure proper transaction management
    and avoid session leaks.
    """

    async def create_note(self, db_session: Session, note: Note) -> Note:
        """Create a new note in the repository.

        Args:
            db_session (Session): SQLAlchemy database session for this operation
            note (Note): Domain Note entity to create

        Returns:
            Note: Created note as stored
        """
        try:
            db_note = NoteORM(
                id=note.id,
                owner=note.owner,
                title=note.title,
                content=note.content,
                image_key=note.image_key,
                audio_key=note.audio_key,
                created_at=note.created_at,
                updated_at=note.updated_at,
            )

            db_session.add(db_note)
            db_session.commit()
            db_session.refresh(db_note)

            return self._orm_to_domain_entity(db_note)

        except Exception as e:
            db_session.rollback()
            logger.error(f"Failed to create note: {str(e)}")
            raise

    async def get_note_by_id(self, db_session: Session, note_id: str) -> Optional[Note]:
        """Get a note by ID regardless of owner.

        Args:
            db_session (Session): Database session.
            note_id (str): The ID of the note to retrieve.

        Returns:
            Optional[Note]: The note if found, None otherwise.
        """
        try:
            note_orm = db_session.query(NoteORM).filter(NoteORM.id == note_id).first()

            if not note_orm:
                logger.info(f"Note {note_id} not found")
                return None

            return self._orm_to_domain_entity(note_orm)

        except Exception as e:
            logger.error(f"Failed to get note {note_id}: {str(e)}")
            raise

    async def list_notes_by_owner(
        self, db_session: Session, owner: str, page: int, limit: int
    ) -> Tuple[List[Note], int]:
        """Get a page of the owner's notes, oldest first.

        Args:
            db_session (Session): Database session.
            owner (str): The identity whose notes to retrieve.
            page (int): Page number (1-based).
            limit (int): Number of notes per page.

        Returns:
            Tuple[List[Note], int]: A tuple containing the list of notes and total count.
        """
        try:
            base_query = db_session.query(NoteORM).filter(NoteORM.owner == owner)

            total_count = base_query.count()
            offset = PaginationMetadata.calculate(
                current_page=page, total_notes=total_count, notes_per_page=limit
            ).offset

            notes_orm = (
                base_query.order_by(NoteORM.created_at.asc(), NoteORM.id.asc())
                .offset(offset)
                .limit(limit)
                .all()
            )

            notes = [self._orm_to_domain_entity(note_orm) for note_orm in notes_orm]
            return notes, total_count

        except Exception as e:
            logger.error(f"Failed to list notes for {owner}: {str(e)}")
            raise

    async def delete_note(self, db_session: Session, note_id: str, owner: str) -> bool:
        """Delete a note owned by ``owner``.

        Args:
            db_session (Session): Database session.
            note_id (str): The ID of the note to delete.
            owner (str): The identity of the user who owns the note.

        Returns:
            bool: True if the note was deleted, False if not found.
        """
        try:
            db_note = (
                db_session.query(NoteORM)
                .filter(NoteORM.id == note_id, NoteORM.owner == owner)
                .first()
            )

            if not db_note:
                return False

            db_session.delete(db_note)
            db_session.commit()

            return True

        except Exception as e:
            db_session.rollback()
            logger.error(f"Failed to delete note {note_id}: {str(e)}")
            raise

    def _orm_to_domain_entity(self, note_orm: NoteORM) -> Note:
        """Convert a NoteORM row to a Note domain entity."""
        return Note(
            id=note_orm.id,
            owner=note_orm.owner,
            title=note_orm.title,
            content=note_orm.content,
            image_key=note_orm.image_key,
            audio_key=note_orm.audio_key,
            created_at=note_orm.created_at,
            updated_at=note_orm.updated_at,
        )

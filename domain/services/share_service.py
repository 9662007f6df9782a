"""Note sharing domain service.

This module contains the ShareService that forwards a note's contents
to an email address on behalf of the note's owner.

The service never raises: every invocation ends in exactly one
``ShareResult``. A missing note and a note owned by someone else produce
the same DENIED result. Each invocation makes at most one send attempt
and never retries.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from domain.entities.share import ShareEmail, ShareResult
from domain.policies.ownership import caller_owns_note

if TYPE_CHECKING:
    from domain.gateways.email_gateway import EmailGateway
    from domain.repositories.note_repository import NoteRepository
    from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

DEFAULT_SHARE_SUBJECT = "Shared Note from Dear Diary"


class ShareService:
    """Domain service for sharing notes via email.

    Attributes:
        _note_repository: Record store used for the single lookup by id.
        _email_gateway: Email service used for the single send attempt.
        _sender_address: Verified sender address, supplied by configuration.
        _subject: Subject line of outgoing emails.

    Example:
        >>> service = ShareService(repository, gateway, "diary@example.com")
        >>> result = await service.share_note_via_email(db, note_id, "bob@example.com", "alice")
        >>> result.status
        <ShareStatus.SHARED: 'shared'>
    """

    def __init__(
        self,
        note_repository: "NoteRepository",
        email_gateway: "EmailGateway",
        sender_address: str,
        subject: str = DEFAULT_SHARE_SUBJECT,
    ) -> None:
        self._note_repository = note_repository
        self._email_gateway = email_gateway
        self._sender_address = sender_address
        self._subject = subject

    async def share_note_via_email(
        self,
        db_session: "Session",
        note_id: str,
        recipient_email: str,
        caller: str,
    ) -> ShareResult:
        """Email a note's title and content to ``recipient_email``.

        Args:
            db_session: Database session for the record lookup.
            note_id: Identifier of the note to share.
            recipient_email: Destination address.
            caller: Authenticated identity of the caller.

        Returns:
            ShareResult: SHARED, DENIED (not found or not owner) or FAILED.
        """
        logger.info(f"User {caller} sharing note {note_id} via email")

        try:
            if not self._sender_address:
                raise ValueError("No sender address configured for shared notes")

            note = await self._note_repository.get_note_by_id(db_session, note_id)

            if not caller_owns_note(caller, note):
                logger.warning(f"Denied share of note {note_id} for user {caller}")
                return ShareResult.denied()

            email = ShareEmail.from_note(note, recipient_email, self._subject)
            await self._email_gateway.send_email(
                sender=self._sender_address,
                recipient=email.recipient,
                subject=email.subject,
                text_body=email.text_body,
            )

            logger.info(f"Shared note {note_id} with {recipient_email}")
            return ShareResult.shared()

        except Exception as e:
            logger.error(f"Failed to share note {note_id}: {str(e)}")
            return ShareResult.failed(str(e))

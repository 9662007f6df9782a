"""Serverless entry point for sharing a note via email.

The function is invoked as a GraphQL field resolver. The event carries the
field arguments and the caller identity resolved by the authorizer:

    {
        "arguments": {"noteId": "...", "recipientEmail": "..."},
        "identity": {"username": "..."}
    }

The resolver returns a single status string.
"""

import asyncio
import logging
from typing import Any, Dict, Optional

from domain.entities.share import ShareResult
from domain.gateways.email_gateway import EmailGateway
from domain.services.share_service import ShareService
from infrastructure.repositories.sqlalchemy_note_repository import (
    SqlAlchemyNoteRepository,
)
from sqlalchemy.orm import sessionmaker
from utils.aws import build_email_gateway
from utils.config import Settings
from utils.dependencies import configure_logging, create_session_factory

logger = logging.getLogger(__name__)


class InvalidShareEvent(ValueError):
    """Raised when the invocation event lacks the expected fields."""

    pass


def parse_share_event(event: Dict[str, Any]):
    """Extract ``(note_id, recipient_email, caller)`` from a resolver event.

    Raises:
        InvalidShareEvent: If any field is missing or empty.
    """
    try:
        arguments = event["arguments"]
        note_id = arguments["noteId"]
        recipient_email = arguments["recipientEmail"]
        caller = (event.get("identity") or {}).get("username")
    except (KeyError, TypeError, AttributeError) as e:
        raise InvalidShareEvent(f"Malformed share event: {e}") from e

    if not note_id or not recipient_email or not caller:
        raise InvalidShareEvent("Share event is missing noteId, recipientEmail or identity")

    return note_id, recipient_email, caller


async def share_from_event(
    event: Dict[str, Any], share_service: ShareService, session_factory: sessionmaker
) -> ShareResult:
    """Run one share invocation for ``event`` on a fresh session."""
    try:
        note_id, recipient_email, caller = parse_share_event(event)
    except InvalidShareEvent as e:
        logger.error(str(e))
        return ShareResult.failed(str(e))

    db = session_factory()
    try:
        return await share_service.share_note_via_email(
            db, note_id, recipient_email, caller
        )
    finally:
        db.close()


def build_share_service(
    settings: Settings, email_gateway: Optional[EmailGateway] = None
) -> ShareService:
    """Wire the share service from settings."""
    return ShareService(
        SqlAlchemyNoteRepository(),
        email_gateway or build_email_gateway(settings),
        sender_address=settings.share_sender_email,
        subject=settings.share_email_subject,
    )


def handler(
    event: Dict[str, Any],
    context: Any = None,
    settings: Optional[Settings] = None,
    email_gateway: Optional[EmailGateway] = None,
    session_factory: Optional[sessionmaker] = None,
) -> str:
    """Resolver entry point.

    Collaborators are built per invocation from ``settings`` unless they are
    passed in explicitly.

    Args:
        event: Resolver event with ``arguments`` and ``identity``.
        context: Runtime context, unused.
        settings: Runtime settings; read from the environment when omitted.
        email_gateway: Email service; SES when omitted.
        session_factory: Record store sessions; built from settings when omitted.

    Returns:
        str: Status message for the caller.
    """
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    owns_engine = session_factory is None

    try:
        share_service = build_share_service(settings, email_gateway)
        session_factory = session_factory or create_session_factory(
            settings.database_url
        )
    except Exception as e:
        logger.error(f"Failed to initialise share handler: {e}")
        return ShareResult.failed(str(e)).message

    invocation = share_from_event(event, share_service, session_factory)
    try:
        result = asyncio.run(invocation)
    except Exception as e:
        invocation.close()
        logger.error(f"Share handler could not run: {e}")
        result = ShareResult.failed(str(e))
    finally:
        if owns_engine:
            session_factory.kw["bind"].dispose()

    if result.is_shared():
        logger.info("Share handler finished with status shared")
    else:
        logger.warning(f"Share handler finished with status {result.status.value}")
    return result.message

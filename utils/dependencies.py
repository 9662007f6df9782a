"""Database, user and service dependencies for the Diary Service.

This module provides dependency injection functions for FastAPI,
including database session management and user authentication utilities.

Functions:
    - configure_logging: One-time logging setup for the service
    - create_session_factory: Engine and session factory for a database URL
    - get_db: Database session factory with automatic cleanup
    - get_current_user_id: Extract user ID from request headers
    - get_note_service: Note lifecycle service
    - get_share_service: Note sharing service wired to the app's email gateway

Architecture:
    Nothing here is module-level state. The session factory, settings and
    email gateway are attached to ``app.state`` by the app factory and read
    back per request.
"""

import logging
from typing import Generator

from domain.services.note_service import NoteService
from domain.services.share_service import ShareService
from fastapi import HTTPException, Request
from infrastructure.repositories.sqlalchemy_note_repository import (
    SqlAlchemyNoteRepository,
)
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)


def configure_logging(log_level: str) -> None:
    """Configure root logging once for the process.

    Args:
        log_level (str): Level name such as "INFO" or "DEBUG".
    """
    logging.basicConfig(level=getattr(logging, log_level.upper(), logging.INFO))


def create_session_factory(database_url: str) -> sessionmaker:
    """Create a SQLAlchemy session factory bound to ``database_url``.

    In-memory SQLite URLs share a single connection so every session sees
    the same database.

    Args:
        database_url (str): SQLAlchemy database URL.

    Returns:
        sessionmaker: Configured session factory.
    """
    if database_url.startswith("sqlite"):
        engine = create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_engine(database_url)

    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db(request: Request) -> Generator[Session, None, None]:
    """Get database session with automatic cleanup.

    Yields:
        Session: SQLAlchemy database session that automatically closes after use.
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_current_user_id(request: Request) -> str:
    """Extract user ID from request headers.

    The authenticating gateway in front of the service verifies the caller
    and forwards its identity in ``X-User-ID``.

    Args:
        request (Request): FastAPI request object containing headers.

    Returns:
        str: User ID extracted from X-User-ID header.

    Raises:
        HTTPException: 401 if X-User-ID header is missing.

    Example:
        >>> user_id = get_current_user_id(request)
        >>> print(user_id)
        "alice"
    """
    user_id = request.headers.get("X-User-ID")
    if not user_id:
        raise HTTPException(status_code=401, detail="User ID not found in headers")
    return user_id


def get_note_service() -> NoteService:
    """Create the note service with its repository dependency.

    Returns:
        NoteService: Configured domain service ready for use.
    """
    return NoteService(SqlAlchemyNoteRepository())


def get_share_service(request: Request) -> ShareService:
    """Create the share service from the app's settings and email gateway.

    Args:
        request (Request): FastAPI request, used to reach ``app.state``.

    Returns:
        ShareService: Configured sharing service.
    """
    settings = request.app.state.settings
    return ShareService(
        SqlAlchemyNoteRepository(),
        request.app.state.email_gateway,
        sender_address=settings.share_sender_email,
        subject=settings.share_email_subject,
    )

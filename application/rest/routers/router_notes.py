import logging

from application.rest.schemas.input.note_input import NoteCreate
from application.rest.schemas.input.share_input import ShareEmailRequest
from application.rest.schemas.output.common_output import ErrorResponse, MessageResponse
from application.rest.schemas.output.note_output import NoteResponse, NotesListResponse
from application.rest.schemas.output.share_output import ShareEmailResponse
from domain.entities.share import ShareStatus
from domain.services.note_service import NoteNotFoundError, NoteService
from domain.services.share_service import ShareService
from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from utils.dependencies import (
    get_current_user_id,
    get_db,
    get_note_service,
    get_share_service,
)

logger = logging.getLogger(__name__)
router = APIRouter()

NOT_FOUND_DETAIL = "Note not found"

SHARE_STATUS_CODES = {
    ShareStatus.SHARED: status.HTTP_200_OK,
    ShareStatus.DENIED: status.HTTP_404_NOT_FOUND,
    ShareStatus.FAILED: status.HTTP_502_BAD_GATEWAY,
}

_UNAUTHORIZED = {
    "model": ErrorResponse,
    "description": "User authentication required.",
    "content": {
        "application/json": {"example": {"detail": "User ID not found in headers"}}
    },
}


@router.get(
    path="/notes",
    description="Retrieve the current user's notes in creation order with pagination.",
    response_model=NotesListResponse,
    status_code=status.HTTP_200_OK,
    responses={
        status.HTTP_400_BAD_REQUEST: {
            "model": ErrorResponse,
            "description": "Invalid pagination parameters.",
        },
        status.HTTP_401_UNAUTHORIZED: _UNAUTHORIZED,
        status.HTTP_500_INTERNAL_SERVER_ERROR: {
            "model": ErrorResponse,
            "description": "Internal server error - database query failed.",
        },
    },
)
async def list_notes(
    request: Request,
    page: int = 1,
    limit: int = 100,
    db: Session = Depends(get_db),
    note_service: NoteService = Depends(get_note_service),
) -> NotesListResponse:
    """List the caller's notes.

    Args:
        request (Request): FastAPI request object containing user headers.
        page (int, optional): Page number for pagination. Defaults to 1.
        limit (int, optional): Number of notes per page. Defaults to 100.
        db (Session): Database session dependency injected by FastAPI.
        note_service (NoteService): Domain service for the note lifecycle.

    Returns:
        NotesListResponse: Page of notes with pagination metadata.

    Raises:
        HTTPException: 400 for invalid pagination, 401 without identity, 500 otherwise.
    """
    user_id = get_current_user_id(request)
    logger.info(f"Listing notes for user_id: {user_id}, page: {page}, limit: {limit}")

    try:
        notes, pagination = await note_service.list_notes_paginated(
            db, user_id, page, limit
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)
        ) from e
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve notes",
        ) from e

    return NotesListResponse.from_entities(notes, pagination)


@router.post(
    path="/notes",
    description="Create a note owned by the current user.",
    response_model=NoteResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_400_BAD_REQUEST: {
            "model": ErrorResponse,
            "description": "Missing title or content.",
            "content": {
                "application/json": {
                    "example": {"detail": "Note title cannot be empty"}
                }
            },
        },
        status.HTTP_401_UNAUTHORIZED: _UNAUTHORIZED,
        status.HTTP_500_INTERNAL_SERVER_ERROR: {
            "model": ErrorResponse,
            "description": "Internal server error - note creation failed.",
        },
    },
)
async def create_note(
    note_create: NoteCreate,
    request: Request,
    db: Session = Depends(get_db),
    note_service: NoteService = Depends(get_note_service),
) -> NoteResponse:
    """Create a new note for the caller.

    Args:
        note_create (NoteCreate): Title, content and optional attachment keys.
        request (Request): FastAPI request object containing user headers.
        db (Session): Database session dependency injected by FastAPI.
        note_service (NoteService): Domain service for the note lifecycle.

    Returns:
        NoteResponse: The created note.
    """
    user_id = get_current_user_id(request)

    try:
        note = await note_service.create_note(
            db,
            owner=user_id,
            title=note_create.title,
            content=note_create.content,
            image_key=note_create.image_key,
            audio_key=note_create.audio_key,
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)
        ) from e
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create note",
        ) from e

    return NoteResponse.from_entity(note)


@router.get(
    path="/notes/{note_id}",
    description="Retrieve one of the current user's notes.",
    response_model=NoteResponse,
    status_code=status.HTTP_200_OK,
    responses={
        status.HTTP_401_UNAUTHORIZED: _UNAUTHORIZED,
        status.HTTP_404_NOT_FOUND: {
            "model": ErrorResponse,
            "description": "Note not found or owned by another user.",
            "content": {"application/json": {"example": {"detail": NOT_FOUND_DETAIL}}},
        },
    },
)
async def get_note(
    note_id: str,
    request: Request,
    db: Session = Depends(get_db),
    note_service: NoteService = Depends(get_note_service),
) -> NoteResponse:
    """Get a single note owned by the caller."""
    user_id = get_current_user_id(request)

    try:
        note = await note_service.get_note(db, note_id, user_id)
    except NoteNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_DETAIL
        ) from e
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve note",
        ) from e

    return NoteResponse.from_entity(note)


@router.delete(
    path="/notes/{note_id}",
    description="Delete one of the current user's notes.",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    responses={
        status.HTTP_401_UNAUTHORIZED: _UNAUTHORIZED,
        status.HTTP_404_NOT_FOUND: {
            "model": ErrorResponse,
            "description": "Note not found or owned by another user.",
            "content": {"application/json": {"example": {"detail": NOT_FOUND_DETAIL}}},
        },
    },
)
async def delete_note(
    note_id: str,
    request: Request,
    db: Session = Depends(get_db),
    note_service: NoteService = Depends(get_note_service),
) -> MessageResponse:
    """Delete a note owned by the caller.

    Raises:
        HTTPException: 404 if the note does not exist or belongs to someone else.
    """
    user_id = get_current_user_id(request)

    try:
        await note_service.delete_note(db, note_id, user_id)
    except NoteNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_DETAIL
        ) from e
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete note",
        ) from e

    return MessageResponse(message="Note deleted successfully", data={"id": note_id})


@router.post(
    path="/notes/{note_id}/share-email",
    description="Email the note's title and content to an address. Owner only.",
    response_model=ShareEmailResponse,
    status_code=status.HTTP_200_OK,
    responses={
        status.HTTP_401_UNAUTHORIZED: _UNAUTHORIZED,
        status.HTTP_404_NOT_FOUND: {
            "model": ShareEmailResponse,
            "description": "Note not found or the caller does not own it.",
        },
        status.HTTP_502_BAD_GATEWAY: {
            "model": ShareEmailResponse,
            "description": "The record store or email service failed.",
        },
    },
)
async def share_note_via_email(
    note_id: str,
    share_request: ShareEmailRequest,
    request: Request,
    db: Session = Depends(get_db),
    share_service: ShareService = Depends(get_share_service),
) -> JSONResponse:
    """Share a note by email.

    The body is identical for a missing note and a note owned by someone else.

    Args:
        note_id (str): Identifier of the note to share.
        share_request (ShareEmailRequest): Recipient address.
        request (Request): FastAPI request object containing user headers.
        db (Session): Database session dependency injected by FastAPI.
        share_service (ShareService): Domain service performing the share.

    Returns:
        JSONResponse: ShareEmailResponse with 200, 404 or 502.
    """
    user_id = get_current_user_id(request)

    result = await share_service.share_note_via_email(
        db, note_id, share_request.recipient_email, user_id
    )

    return JSONResponse(
        status_code=SHARE_STATUS_CODES[result.status],
        content=ShareEmailResponse.from_result(result).model_dump(),
    )

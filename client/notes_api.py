"""HTTP client for the Diary Service REST API.

The client authenticates the same way the gateway forwards identity to the
service: every request carries the caller in ``X-User-ID``.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0
LIST_PAGE_SIZE = 100


class NotesApiClient:
    """Async client for the diary notes endpoints.

    Args:
        base_url (str): Root URL of the service, e.g. "http://localhost:8002".
        user_id (str): Authenticated identity of the caller.
        transport (httpx.AsyncBaseTransport, optional): Custom transport, e.g. an
            ASGI transport in tests.
        page_size (int): Notes requested per page by ``list_all_notes``.

    Example:
        >>> async with NotesApiClient("http://localhost:8002", "alice") as api:
        ...     notes = await api.list_all_notes()
    """

    def __init__(
        self,
        base_url: str,
        user_id: str,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = DEFAULT_TIMEOUT,
        page_size: int = LIST_PAGE_SIZE,
    ) -> None:
        self._page_size = page_size
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers={"X-User-ID": user_id},
            transport=transport,
            timeout=timeout,
        )

    async def __aenter__(self) -> "NotesApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def list_notes(self, page: int = 1, limit: int = LIST_PAGE_SIZE) -> Dict[str, Any]:
        """Fetch one page of notes.

        Returns:
            dict: ``{"notes": [...], "pagination": {...}}`` as sent by the service.

        Raises:
            httpx.HTTPStatusError: On a non-2xx response.
        """
        response = await self._client.get("/notes", params={"page": page, "limit": limit})
        response.raise_for_status()
        return response.json()

    async def list_all_notes(self) -> List[Dict[str, Any]]:
        """Fetch every note of the caller, following pages in order."""
        notes: List[Dict[str, Any]] = []
        page = 1
        while True:
            body = await self.list_notes(page=page, limit=self._page_size)
            notes.extend(body["notes"])
            if not body["pagination"]["has_next"]:
                return notes
            page += 1

    async def create_note(
        self,
        title: str,
        content: str,
        image_key: Optional[str] = None,
        audio_key: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Create a note and return it as stored."""
        response = await self._client.post(
            "/notes",
            json={
                "title": title,
                "content": content,
                "image_key": image_key,
                "audio_key": audio_key,
            },
        )
        response.raise_for_status()
        return response.json()

    async def delete_note(self, note_id: str) -> None:
        response = await self._client.delete(f"/notes/{note_id}")
        response.raise_for_status()

    async def share_note_via_email(self, note_id: str, recipient_email: str) -> Dict[str, Any]:
        """Ask the service to email a note.

        Denied and failed shares are not raised; the structured body is
        returned as-is so callers can branch on ``status``.
        """
        response = await self._client.post(
            f"/notes/{note_id}/share-email",
            json={"recipient_email": recipient_email},
        )
        if response.status_code in (200, 404, 502):
            return response.json()
        response.raise_for_status()
        return response.json()

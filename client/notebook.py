"""Local notebook view of the caller's diary.

The notebook keeps the ordered list of the caller's notes plus the index
of the page currently shown. Local state changes only after the remote
call that justifies it has succeeded; on failure the error is logged and
the state is left as it was.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import httpx
from client.attachments import AttachmentUpload, build_attachment_key
from client.notes_api import NotesApiClient
from domain.gateways.storage_gateway import StorageError, StorageGateway
from utils.aws import build_storage_gateway
from utils.config import Settings

logger = logging.getLogger(__name__)

NEXT = "next"
PREVIOUS = "prev"


@dataclass
class NoteView:
    """A note as displayed, with attachment URLs resolved.

    Attributes:
        id (str): Note identifier.
        title (str): Note title.
        content (str): Note content.
        image_key (Optional[str]): Storage key of the image, if any.
        audio_key (Optional[str]): Storage key of the audio clip, if any.
        image_url (Optional[str]): Time-limited URL of the image.
        audio_url (Optional[str]): Time-limited URL of the audio clip.
    """

    id: str
    title: str
    content: str
    image_key: Optional[str] = None
    audio_key: Optional[str] = None
    image_url: Optional[str] = None
    audio_url: Optional[str] = None

    @classmethod
    def from_api(cls, payload: Dict[str, Any]) -> "NoteView":
        return cls(
            id=payload["id"],
            title=payload["title"],
            content=payload["content"],
            image_key=payload.get("image_key"),
            audio_key=payload.get("audio_key"),
        )


class Notebook:
    """Client-side state for paging through, adding and deleting notes.

    Args:
        api (NotesApiClient): Client for the diary REST API.
        storage (StorageGateway): Object storage for attachment uploads and URLs.

    Example:
        >>> notebook = Notebook(api, storage)
        >>> await notebook.refresh()
        >>> await notebook.add_note("Friday", "Finally some sun", image=photo)
        >>> notebook.current_note.title
        'Friday'
    """

    def __init__(self, api: NotesApiClient, storage: StorageGateway) -> None:
        self._api = api
        self._storage = storage
        self.notes: List[NoteView] = []
        self.current_index = 0

    async def aclose(self) -> None:
        await self._api.aclose()

    @property
    def current_note(self) -> Optional[NoteView]:
        if not self.notes:
            return None
        return self.notes[self.current_index]

    async def refresh(self) -> bool:
        """Reload every note of the caller and resolve attachment URLs.

        The listing order is kept as returned by the service.

        Returns:
            bool: True if the view was replaced, False if fetching failed.
        """
        try:
            payloads = await self._api.list_all_notes()
            views = []
            for payload in payloads:
                view = NoteView.from_api(payload)
                await self._resolve_urls(view)
                views.append(view)
        except (httpx.HTTPError, StorageError) as e:
            logger.error(f"Error fetching notes: {e}")
            return False

        self.notes = views
        if self.current_index >= len(self.notes):
            self.current_index = max(0, len(self.notes) - 1)
        logger.info(f"Loaded {len(self.notes)} notes")
        return True

    async def add_note(
        self,
        title: str,
        content: str,
        image: Optional[AttachmentUpload] = None,
        audio: Optional[AttachmentUpload] = None,
    ) -> Optional[NoteView]:
        """Upload attachments, then create the note, then show it.

        The steps run strictly in order (image upload, audio upload, record
        creation) and stop at the first failure. The record is only created
        once every upload has completed.

        Args:
            title: Note title; blank titles are rejected without any request.
            content: Note content; blank content is rejected without any request.
            image: Optional image file.
            audio: Optional captured audio clip.

        Returns:
            Optional[NoteView]: The new note, or None if rejected or failed.
        """
        if not title or not title.strip() or not content or not content.strip():
            logger.info("Title and content are required; note not created")
            return None

        uploads = [("image_key", image), ("audio_key", audio)]
        keys: Dict[str, Optional[str]] = {"image_key": None, "audio_key": None}

        try:
            for field_name, upload in uploads:
                if upload is None:
                    continue
                key = build_attachment_key(upload)
                await self._storage.put_object(key, upload.data, upload.content_type)
                keys[field_name] = key

            created = await self._api.create_note(title=title, content=content, **keys)
        except (httpx.HTTPError, StorageError) as e:
            logger.error(f"Error adding note: {e}")
            return None

        view = NoteView.from_api(created)
        try:
            await self._resolve_urls(view)
        except StorageError as e:
            logger.warning(f"Created note {view.id} but could not resolve its URLs: {e}")

        self.notes.append(view)
        self.current_index = len(self.notes) - 1
        return view

    async def delete_note(self, note_id: str) -> bool:
        """Delete a note remotely, then drop it from the local view.

        Returns:
            bool: True if the note was deleted.
        """
        try:
            await self._api.delete_note(note_id)
        except httpx.HTTPError as e:
            logger.error(f"Error deleting note {note_id}: {e}")
            return False

        self.notes = [note for note in self.notes if note.id != note_id]
        if self.current_index >= len(self.notes):
            self.current_index = max(0, len(self.notes) - 1)
        return True

    async def delete_current(self) -> bool:
        """Delete the note on the current page, if there is one."""
        note = self.current_note
        if note is None:
            return False
        return await self.delete_note(note.id)

    async def share_current(self, recipient_email: str) -> Optional[str]:
        """Email the current note; returns the service's status message."""
        note = self.current_note
        if note is None:
            return None
        try:
            body = await self._api.share_note_via_email(note.id, recipient_email)
        except httpx.HTTPError as e:
            logger.error(f"Error sharing note {note.id}: {e}")
            return None
        return body["message"]

    def turn_page(self, direction: str) -> int:
        """Move to the next or previous page within bounds.

        Args:
            direction: "next" or "prev".

        Returns:
            int: The current index after the move.

        Raises:
            ValueError: If the direction is unknown.
        """
        if direction not in (NEXT, PREVIOUS):
            raise ValueError(f"Unknown page direction: {direction}")
        if not self.notes:
            return self.current_index

        if direction == NEXT and self.current_index < len(self.notes) - 1:
            self.current_index += 1
        elif direction == PREVIOUS and self.current_index > 0:
            self.current_index -= 1
        return self.current_index

    async def _resolve_urls(self, view: NoteView) -> None:
        if view.image_key:
            view.image_url = await self._storage.get_signed_url(view.image_key)
        if view.audio_key:
            view.audio_url = await self._storage.get_signed_url(view.audio_key)


def build_notebook(settings: Settings, user_id: str) -> Notebook:
    """Wire a notebook for ``user_id`` against the configured service and bucket.

    Args:
        settings (Settings): Runtime settings with the API URL and S3 bucket.
        user_id (str): Authenticated identity of the caller.

    Returns:
        Notebook: Notebook backed by the REST API and S3 attachment storage.
    """
    return Notebook(
        NotesApiClient(settings.api_url, user_id),
        build_storage_gateway(settings),
    )

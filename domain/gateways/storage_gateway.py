"""Object storage gateway interface.

Attachment blobs live in an external object store addressed by
client-generated keys. Reads go through time-limited signed URLs.
"""

from abc import ABC, abstractmethod


class StorageError(Exception):
    """Raised when the object store fails an upload or URL request."""

    pass


class StorageGateway(ABC):
    """Abstract gateway to the attachment object store."""

    @abstractmethod
    async def put_object(self, key: str, data: bytes, content_type: str) -> None:
        """Store ``data`` under ``key``.

        Raises:
            StorageError: If the upload fails.
        """
        pass

    @abstractmethod
    async def get_signed_url(self, key: str) -> str:
        """Return a time-limited retrieval URL for ``key``.

        The expiry is implementation-defined.

        Raises:
            StorageError: If the URL cannot be produced.
        """
        pass

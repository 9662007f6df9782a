"""Email gateway interface.

Outgoing email is delegated to a managed service. The domain only needs
a fire-and-forget ``send_email``; no delivery confirmation is consumed.
"""

from abc import ABC, abstractmethod


class EmailDeliveryError(Exception):
    """Raised when the email service rejects or fails a send."""

    pass


class EmailGateway(ABC):
    """Abstract gateway to the email service."""

    @abstractmethod
    async def send_email(
        self, sender: str, recipient: str, subject: str, text_body: str
    ) -> None:
        """Send a plain-text email.

        Args:
            sender: Verified sender address.
            recipient: Destination address.
            subject: Subject line.
            text_body: Plain-text body.

        Raises:
            EmailDeliveryError: If the email service fails the request.
        """
        pass

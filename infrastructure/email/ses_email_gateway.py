"""Amazon SES implementation of the email gateway."""

import logging

from botocore.exceptions import BotoCoreError, ClientError
from domain.gateways.email_gateway import EmailDeliveryError, EmailGateway
from fastapi.concurrency import run_in_threadpool

logger = logging.getLogger(__name__)


class SesEmailGateway(EmailGateway):
    """Send plain-text email through Amazon SES.

    The boto3 client is injected so the region and credentials stay with
    whoever builds the gateway. boto3 calls block, so each one runs in the
    worker threadpool and the event loop keeps serving other requests.

    Example:
        >>> gateway = SesEmailGateway(boto3.client("ses", region_name="us-east-1"))
        >>> await gateway.send_email("diary@example.com", "bob@example.com", "Hi", "Body")
    """

    def __init__(self, ses_client) -> None:
        self._ses_client = ses_client

    async def send_email(
        self, sender: str, recipient: str, subject: str, text_body: str
    ) -> None:
        try:
            response = await run_in_threadpool(
                self._ses_client.send_email,
                Source=sender,
                Destination={"ToAddresses": [recipient]},
                Message={
                    "Subject": {"Data": subject},
                    "Body": {"Text": {"Data": text_body}},
                },
            )
        except (BotoCoreError, ClientError) as e:
            logger.error(f"SES rejected email to {recipient}: {e}")
            raise EmailDeliveryError(f"Failed to send email: {e}") from e

        logger.info(f"SES accepted email to {recipient}: {response.get('MessageId')}")

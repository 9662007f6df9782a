"""Amazon S3 implementation of the attachment storage gateway."""

import logging

from botocore.exceptions import BotoCoreError, ClientError
from domain.gateways.storage_gateway import StorageError, StorageGateway
from fastapi.concurrency import run_in_threadpool

logger = logging.getLogger(__name__)

DEFAULT_URL_EXPIRES_IN = 900


class S3StorageGateway(StorageGateway):
    """Store attachment blobs in one S3 bucket and hand out presigned URLs.

    Uploads and signing run in the worker threadpool.

    Args:
        s3_client: boto3 S3 client.
        bucket (str): Bucket holding the attachments.
        expires_in (int): Lifetime of presigned URLs, in seconds.
    """

    def __init__(
        self, s3_client, bucket: str, expires_in: int = DEFAULT_URL_EXPIRES_IN
    ) -> None:
        self._s3_client = s3_client
        self._bucket = bucket
        self._expires_in = expires_in

    async def put_object(self, key: str, data: bytes, content_type: str) -> None:
        try:
            await run_in_threadpool(
                self._s3_client.put_object,
                Bucket=self._bucket,
                Key=key,
                Body=data,
                ContentType=content_type or "application/octet-stream",
            )
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Failed to upload {key} to {self._bucket}: {e}")
            raise StorageError(f"Failed to upload {key}: {e}") from e

        logger.info(f"Uploaded {len(data)} bytes to s3://{self._bucket}/{key}")

    async def get_signed_url(self, key: str) -> str:
        try:
            return await run_in_threadpool(
                self._s3_client.generate_presigned_url,
                "get_object",
                Params={"Bucket": self._bucket, "Key": key},
                ExpiresIn=self._expires_in,
            )
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Failed to presign {key}: {e}")
            raise StorageError(f"Failed to sign URL for {key}: {e}") from e

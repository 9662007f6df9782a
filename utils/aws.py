"""AWS client factories for the managed collaborators.

Functions:
    - build_email_gateway: SES-backed email gateway for the configured region
    - build_storage_gateway: S3-backed attachment storage for the configured bucket
"""

import boto3
from infrastructure.email.ses_email_gateway import SesEmailGateway
from infrastructure.storage.s3_storage_gateway import S3StorageGateway

from .config import Settings


def build_email_gateway(settings: Settings) -> SesEmailGateway:
    """Create the SES email gateway.

    Args:
        settings (Settings): Runtime settings with the AWS region.

    Returns:
        SesEmailGateway: Gateway wrapping a fresh boto3 SES client.
    """
    return SesEmailGateway(boto3.client("ses", region_name=settings.aws_region))


def build_storage_gateway(settings: Settings) -> S3StorageGateway:
    """Create the S3 attachment storage gateway.

    Args:
        settings (Settings): Runtime settings with region, bucket and URL expiry.

    Returns:
        S3StorageGateway: Gateway wrapping a fresh boto3 S3 client.
    """
    return S3StorageGateway(
        boto3.client("s3", region_name=settings.aws_region),
        bucket=settings.attachments_bucket,
        expires_in=settings.signed_url_expires_in,
    )

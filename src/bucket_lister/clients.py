# src/bucket_lister/clients.py

"""
Client wrappers for interacting with AWS S3.

The handler only depends on the `BucketLister` protocol, so the boto3-backed
implementation here can be swapped for a fake in tests without touching
credentials or environment state.
"""

import logging
from typing import TYPE_CHECKING, Protocol

import pydantic
from botocore.exceptions import BotoCoreError, ClientError

from .exceptions import BucketListingError
from .schemas import ListBucketsOutput

if TYPE_CHECKING:
    from mypy_boto3_s3.client import S3Client as S3ClientType

logger = logging.getLogger(__name__)


class BucketLister(Protocol):
    """Anything that can return the bucket names visible to the caller."""

    def list_bucket_names(self) -> list[str]: ...


class S3BucketLister:
    """
    A wrapper for the S3 ListBuckets operation.

    Credentials are resolved by boto3's default chain; nothing is passed in
    explicitly.
    """

    def __init__(self, s3_client: "S3ClientType"):
        """
        Initializes the S3BucketLister.

        Args:
            s3_client: A typed boto3 S3 client.
        """
        self._client = s3_client

    def list_bucket_names(self) -> list[str]:
        """
        Calls ListBuckets once and returns the bucket names in service order.
        Every failure is raised as a BucketListingError carrying the error text.
        """
        try:
            response = self._client.list_buckets()
            output = ListBucketsOutput.model_validate(response)
        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code", "Unknown")
            error_message = e.response.get("Error", {}).get("Message") or str(e)
            raise BucketListingError(
                error_message,
                context={
                    "aws_error_code": error_code,
                    "aws_error_message": error_message,
                },
            ) from e
        except BotoCoreError as e:
            raise BucketListingError(
                str(e),
                error_code="S3_CONNECTION_ERROR",
                context={"botocore_error": e.__class__.__name__},
            ) from e
        except pydantic.ValidationError as e:
            raise BucketListingError(
                "Malformed ListBuckets response",
                error_code="MALFORMED_RESPONSE",
                context={"validation_error_count": e.error_count()},
            ) from e

        bucket_names = output.bucket_names
        logger.debug(
            "ListBuckets completed successfully",
            extra={"bucket_count": len(bucket_names)},
        )
        return bucket_names

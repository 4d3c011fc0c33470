"""S3 bucket backed by boto3."""

import asyncio
import logging
import mimetypes
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from s3podcast.storage.base import PUBLIC_READ, StorageBucket
from s3podcast.storage.keys import FEED_KEY
from s3podcast.utils.errors import RemoteError

logger = logging.getLogger(__name__)

_MISSING_BUCKET_CODES = {"404", "NoSuchBucket", "NotFound"}
_DEFAULT_REGION = "us-east-1"


def _error_code(error: ClientError) -> str:
    return str(error.response.get("Error", {}).get("Code", ""))


def content_type_for(key: str) -> str:
    """Best-effort Content-Type for an object key."""
    if key == FEED_KEY:
        return "application/rss+xml"
    guessed, _ = mimetypes.guess_type(key)
    return guessed or "application/octet-stream"


class S3Bucket(StorageBucket):
    """A bucket on S3 or an S3-compatible service.

    boto3 is synchronous, so every call runs in a worker thread and the
    coroutine suspends until it returns.

    Example:
        >>> bucket = S3Bucket("my-podcast")
        >>> await bucket.upsert_object("feed.rss", b"<rss/>")
    """

    def __init__(
        self,
        name: str,
        acl: str = PUBLIC_READ,
        region: str | None = None,
        endpoint_url: str | None = None,
        client: Any | None = None,
    ) -> None:
        """Initialize the bucket handle.

        Args:
            name: Bucket name
            acl: Canned ACL for the bucket and uploaded objects
            region: AWS region (default: from the boto3 environment)
            endpoint_url: Custom endpoint for S3-compatible services
            client: Preconfigured boto3 S3 client (default: new client)
        """
        self.name = name
        self.acl = acl
        self.region = region

        if client is None:
            session = boto3.session.Session()
            client = session.client("s3", region_name=region, endpoint_url=endpoint_url)
        self.client = client

    async def head(self) -> dict[str, Any] | None:
        try:
            return await asyncio.to_thread(self.client.head_bucket, Bucket=self.name)
        except ClientError as e:
            if _error_code(e) in _MISSING_BUCKET_CODES:
                return None
            raise RemoteError(
                f"Failed to check bucket '{self.name}': {e}", operation="head"
            ) from e
        except BotoCoreError as e:
            raise RemoteError(
                f"Failed to check bucket '{self.name}': {e}", operation="head"
            ) from e

    async def create(self) -> None:
        params: dict[str, Any] = {
            "Bucket": self.name,
            "ACL": self.acl,
            # New buckets enforce owner-only ACLs unless told otherwise
            "ObjectOwnership": "BucketOwnerPreferred",
        }
        if self.region and self.region != _DEFAULT_REGION:
            params["CreateBucketConfiguration"] = {"LocationConstraint": self.region}

        try:
            await asyncio.to_thread(self.client.create_bucket, **params)
        except ClientError as e:
            if _error_code(e) == "BucketAlreadyOwnedByYou":
                logger.debug(f"Bucket '{self.name}' already owned, nothing to create")
                return
            raise RemoteError(
                f"Failed to create bucket '{self.name}': {e}", operation="create"
            ) from e
        except BotoCoreError as e:
            raise RemoteError(
                f"Failed to create bucket '{self.name}': {e}", operation="create"
            ) from e

    async def upsert_object(
        self, key: str, data: bytes, content_type: str | None = None
    ) -> None:
        try:
            await asyncio.to_thread(
                self.client.put_object,
                Bucket=self.name,
                Key=key,
                Body=data,
                ACL=self.acl,
                ContentType=content_type or content_type_for(key),
            )
        except (ClientError, BotoCoreError) as e:
            raise RemoteError(
                f"Failed to upload '{key}' to bucket '{self.name}': {e}",
                operation="put",
                key=key,
            ) from e

"""Idempotent bucket provisioning."""

from s3podcast.storage.base import StorageBucket
from s3podcast.utils.events import LOG_PREFIX, EventLogger, NullEventLogger


class BucketLifecycle:
    """Makes sure the destination bucket exists before anything is uploaded."""

    def __init__(self, bucket: StorageBucket, events: EventLogger | None = None) -> None:
        self.bucket = bucket
        self.events = events or NullEventLogger()

    async def exists(self) -> bool:
        return bool(await self.bucket.head())

    async def ensure(self) -> bool:
        """Create the bucket if it is missing.

        Returns:
            True if the bucket was created by this call
        """
        exists = await self.exists()
        self.events.info(f"{LOG_PREFIX} bucket exists", exists=exists)
        if exists:
            return False

        self.events.info(f"{LOG_PREFIX} creating bucket")
        await self.bucket.create()
        self.events.info(f"{LOG_PREFIX} bucket created")
        return True

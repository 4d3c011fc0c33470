"""Upload of episode audio files."""

import aiofiles

from s3podcast.feeds.models import MediaItem
from s3podcast.storage.base import StorageBucket
from s3podcast.storage.keys import object_key


class ItemUploader:
    """Writes a MediaItem's audio file to the bucket under its normalized key."""

    def __init__(self, bucket: StorageBucket) -> None:
        self.bucket = bucket

    async def upload(self, item: MediaItem) -> str:
        """Read the whole local file and upsert it.

        Args:
            item: Episode to upload

        Returns:
            The storage key the file was written to

        Raises:
            OSError: If the local file cannot be read
            RemoteError: If the write fails
        """
        key = object_key(item.filename, item.local_path)

        async with aiofiles.open(item.local_path, "rb") as f:
            data = await f.read()

        await self.bucket.upsert_object(key, data)
        return key

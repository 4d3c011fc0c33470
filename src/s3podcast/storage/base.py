"""Interface for the object storage bucket used by a sync run."""

from abc import ABC, abstractmethod
from typing import Any

PUBLIC_READ = "public-read"


class StorageBucket(ABC):
    """A single bucket that episodes and the feed are written to.

    Attributes:
        name: Bucket name, also the first path segment of public URLs.
        acl: Canned access policy applied to the bucket and its objects.
    """

    name: str
    acl: str

    @abstractmethod
    async def head(self) -> dict[str, Any] | None:
        """Return bucket metadata, or None if the bucket does not exist.

        Raises:
            RemoteError: If the existence check itself fails.
        """

    @abstractmethod
    async def create(self) -> None:
        """Create the bucket with ``acl``. Creating an owned bucket is a no-op.

        Raises:
            RemoteError: If creation fails.
        """

    @abstractmethod
    async def upsert_object(
        self, key: str, data: bytes, content_type: str | None = None
    ) -> None:
        """Create or overwrite the object at ``key``.

        Raises:
            RemoteError: If the write fails.
        """

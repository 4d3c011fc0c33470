"""Sync orchestrator: provisions the bucket, uploads episodes, publishes the feed.

A run is an ordered list of stages sharing one SyncContext. Stages run
strictly one after another and the first exception ends the run; it
reaches the caller unchanged. Objects written before the failure stay in
the bucket. Since every write is an upsert under a deterministic key,
rerunning the same input converges on the same objects and feed.
"""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, Field

from s3podcast.feeds.assembler import DEFAULT_BASE_URL, FeedAssembler
from s3podcast.feeds.models import FeedDescriptor, PodcastDescriptor, PodcastFeedItem
from s3podcast.feeds.serializer import render_feed
from s3podcast.media.probe import MediaProbe
from s3podcast.storage.base import StorageBucket
from s3podcast.storage.keys import FEED_KEY
from s3podcast.storage.lifecycle import BucketLifecycle
from s3podcast.storage.uploader import ItemUploader
from s3podcast.utils.events import LOG_PREFIX, EventLogger, NullEventLogger

logger = logging.getLogger(__name__)

FeedSerializer = Callable[[dict[str, Any]], bytes]


class SyncResult(BaseModel):
    """Outcome of a completed sync run."""

    bucket: str
    bucket_created: bool = False
    uploaded_keys: list[str] = Field(default_factory=list)
    feed_key: str = FEED_KEY
    feed_url: str

    @property
    def episode_count(self) -> int:
        return len(self.uploaded_keys)


@dataclass
class SyncContext:
    """State threaded through the stages of one run."""

    descriptor: PodcastDescriptor
    bucket_created: bool = False
    uploaded_keys: list[str] = field(default_factory=list)
    feed_items: list[PodcastFeedItem] = field(default_factory=list)
    feed: FeedDescriptor | None = None
    document: bytes | None = None


Stage = Callable[[SyncContext], Awaitable[None]]


class SyncOrchestrator:
    """Publish a podcast descriptor's episodes and feed to one bucket.

    Stages, in order:
    1. ensure_bucket - create the bucket if it does not exist
    2. sync_items - per episode: upload, probe, derive the feed item
    3. assemble_feed - channel metadata plus items
    4. serialize_feed - render the RSS document
    5. publish_feed - upsert the document at ``feed.rss``

    Example:
        >>> orchestrator = SyncOrchestrator(S3Bucket("my-podcast"))
        >>> result = await orchestrator.run(descriptor)
        >>> result.feed_url
        'https://s3.amazonaws.com/my-podcast/feed.rss'
    """

    def __init__(
        self,
        bucket: StorageBucket,
        probe: MediaProbe | None = None,
        serializer: FeedSerializer = render_feed,
        events: EventLogger | None = None,
        base_url: str = DEFAULT_BASE_URL,
    ) -> None:
        """Initialize the orchestrator.

        Args:
            bucket: Destination bucket, reused for every call in a run
            probe: Audio metadata extractor (default: ffprobe based)
            serializer: Plain feed data to document bytes (default: render_feed)
            events: Structured event sink (default: discard events)
            base_url: Public storage URL prefix for enclosures and the feed link
        """
        self.bucket = bucket
        self.events = events or NullEventLogger()
        self.lifecycle = BucketLifecycle(bucket, events=self.events)
        self.uploader = ItemUploader(bucket)
        self.probe = probe or MediaProbe()
        self.assembler = FeedAssembler(bucket.name, base_url=base_url)
        self.serializer = serializer

    @property
    def stages(self) -> list[tuple[str, Stage]]:
        return [
            ("ensure_bucket", self._ensure_bucket),
            ("sync_items", self._sync_items),
            ("assemble_feed", self._assemble_feed),
            ("serialize_feed", self._serialize_feed),
            ("publish_feed", self._publish_feed),
        ]

    async def run(self, descriptor: PodcastDescriptor) -> SyncResult:
        """Run every stage in order.

        Raises:
            RemoteError: Bucket check, creation, or an upload failed
            OSError: An episode file could not be read
            ProbeError: An episode file could not be probed
            UnsupportedFormatError: An episode is not mp3 or ogg
            FeedError: The feed document could not be rendered
        """
        self.events.info(f"{LOG_PREFIX} starting sync", bucket=self.bucket.name)
        context = SyncContext(descriptor=descriptor)

        for name, stage in self.stages:
            logger.debug(f"Running stage {name}")
            await stage(context)

        self.events.info(f"{LOG_PREFIX} sync completed", bucket=self.bucket.name)
        return SyncResult(
            bucket=self.bucket.name,
            bucket_created=context.bucket_created,
            uploaded_keys=context.uploaded_keys,
            feed_url=self.assembler.feed_url,
        )

    async def _ensure_bucket(self, context: SyncContext) -> None:
        context.bucket_created = await self.lifecycle.ensure()

    async def _sync_items(self, context: SyncContext) -> None:
        for item in context.descriptor.items:
            self.events.info(f"{LOG_PREFIX} processing item", title=item.title)
            key = await self.uploader.upload(item)
            context.uploaded_keys.append(key)
            self.events.info(f"{LOG_PREFIX} item uploaded to s3", title=item.title, key=key)

            metadata = await self.probe.extract(item.local_path)
            context.feed_items.append(self.assembler.build_item(item, key, metadata))

    async def _assemble_feed(self, context: SyncContext) -> None:
        context.feed = self.assembler.build_feed(context.descriptor, context.feed_items)

    async def _serialize_feed(self, context: SyncContext) -> None:
        assert context.feed is not None
        context.document = self.serializer(context.feed.to_feed_data())
        self.events.info(f"{LOG_PREFIX} generated feed", items=len(context.feed.items))

    async def _publish_feed(self, context: SyncContext) -> None:
        assert context.document is not None
        await self.bucket.upsert_object(FEED_KEY, context.document)
        self.events.info(f"{LOG_PREFIX} feed published", key=FEED_KEY)

"""Assemble feed items and the channel-level feed descriptor."""

from s3podcast.feeds.formats import mime_type_for
from s3podcast.feeds.models import (
    Enclosure,
    FeedDescriptor,
    MediaItem,
    PodcastDescriptor,
    PodcastFeedItem,
)
from s3podcast.media.probe import MediaMetadata
from s3podcast.storage.keys import FEED_KEY, public_url

DEFAULT_BASE_URL = "https://s3.amazonaws.com"


class FeedAssembler:
    """Build feed data for a bucket from uploaded, probed episodes.

    Every URL follows ``{base_url}/{bucket_name}/{key}``.
    """

    def __init__(self, bucket_name: str, base_url: str = DEFAULT_BASE_URL) -> None:
        self.bucket_name = bucket_name
        self.base_url = base_url

    @property
    def feed_url(self) -> str:
        return public_url(self.base_url, self.bucket_name, FEED_KEY)

    def build_item(
        self, item: MediaItem, key: str, metadata: MediaMetadata
    ) -> PodcastFeedItem:
        """Derive the feed entry for one episode.

        The enclosure length is the duration in seconds.

        Raises:
            UnsupportedFormatError: If the probed format has no MIME type
        """
        mime_type = mime_type_for(metadata.format)

        return PodcastFeedItem(
            title=item.title,
            description=item.description,
            pub_date=item.pub_date,
            enclosure=Enclosure(
                url=public_url(self.base_url, self.bucket_name, key),
                length=metadata.duration,
                type=mime_type,
            ),
            itunes_title=item.itunes_title,
            itunes_summary=item.itunes_summary,
            itunes_episode_type=item.itunes_episode_type,
            itunes_explicit=item.itunes_explicit,
            itunes_season=item.itunes_season,
            itunes_duration=metadata.duration,
        )

    def build_feed(
        self, descriptor: PodcastDescriptor, items: list[PodcastFeedItem]
    ) -> FeedDescriptor:
        """Combine channel metadata with the derived items, keeping their order."""
        return FeedDescriptor(
            title=descriptor.title,
            description=descriptor.description,
            link=self.feed_url,
            copyright=descriptor.copyright,
            language=descriptor.language,
            pub_date=descriptor.pub_date,
            last_build_date=descriptor.last_build_date,
            itunes_type=descriptor.itunes_type,
            itunes_subtitle=descriptor.itunes_subtitle,
            itunes_summary=descriptor.itunes_summary,
            itunes_author=descriptor.itunes_author,
            itunes_category=descriptor.itunes_category,
            itunes_explicit=descriptor.itunes_explicit,
            itunes_image=descriptor.itunes_image,
            itunes_owner=descriptor.itunes_owner,
            items=list(items),
        )

"""Podcast descriptor models and RSS feed generation for s3-podcast."""

from s3podcast.feeds.assembler import DEFAULT_BASE_URL, FeedAssembler
from s3podcast.feeds.formats import AudioFormat, mime_type_for
from s3podcast.feeds.models import (
    Enclosure,
    FeedDescriptor,
    MediaItem,
    PodcastDescriptor,
    PodcastFeedItem,
)
from s3podcast.feeds.serializer import render_feed

__all__ = [
    "DEFAULT_BASE_URL",
    "AudioFormat",
    "Enclosure",
    "FeedAssembler",
    "FeedDescriptor",
    "MediaItem",
    "PodcastDescriptor",
    "PodcastFeedItem",
    "mime_type_for",
    "render_feed",
]

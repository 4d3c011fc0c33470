"""RSS serialization with iTunes podcast extensions, using feedgen."""

import logging
from typing import Any

from feedgen.feed import FeedGenerator

from s3podcast.utils.errors import FeedError

logger = logging.getLogger(__name__)


def _channel(fg: FeedGenerator, data: dict[str, Any]) -> None:
    fg.title(data["title"])
    fg.description(data["description"])
    fg.link(href=data["link"], rel="alternate")

    if data.get("language"):
        fg.language(data["language"])
    if data.get("copyright"):
        fg.copyright(data["copyright"])
    if data.get("pubDate"):
        fg.pubDate(data["pubDate"])
    if data.get("lastBuildDate"):
        fg.lastBuildDate(data["lastBuildDate"])

    if data.get("itunes:type"):
        fg.podcast.itunes_type(data["itunes:type"])
    if data.get("itunes:subtitle"):
        fg.podcast.itunes_subtitle(data["itunes:subtitle"])
    if data.get("itunes:summary"):
        fg.podcast.itunes_summary(data["itunes:summary"])
    if data.get("itunes:author"):
        fg.podcast.itunes_author(data["itunes:author"])
    if data.get("itunes:category"):
        fg.podcast.itunes_category(data["itunes:category"])
    if data.get("itunes:explicit"):
        fg.podcast.itunes_explicit(data["itunes:explicit"])
    if data.get("itunes:image"):
        fg.podcast.itunes_image(data["itunes:image"])
    if data.get("itunes:owner"):
        owner = data["itunes:owner"]
        fg.podcast.itunes_owner(name=owner["name"], email=owner["email"])


def _entry(fg: FeedGenerator, item: dict[str, Any]) -> None:
    # feedgen prepends by default; the feed must keep input order
    fe = fg.add_entry(order="append")
    enclosure = item["enclosure"]

    fe.title(item["title"])
    if item.get("description"):
        fe.description(item["description"])
    if item.get("pubDate"):
        fe.pubDate(item["pubDate"])
    fe.guid(enclosure["url"], permalink=False)
    fe.enclosure(enclosure["url"], str(enclosure["length"]), enclosure["type"])

    if item.get("itunes:title"):
        fe.podcast.itunes_title(item["itunes:title"])
    if item.get("itunes:summary"):
        fe.podcast.itunes_summary(item["itunes:summary"])
    if item.get("itunes:episodeType"):
        fe.podcast.itunes_episode_type(item["itunes:episodeType"])
    if item.get("itunes:explicit"):
        fe.podcast.itunes_explicit(item["itunes:explicit"])
    if item.get("itunes:season") is not None:
        fe.podcast.itunes_season(item["itunes:season"])
    if item.get("itunes:duration") is not None:
        fe.podcast.itunes_duration(str(item["itunes:duration"]))


def render_feed(feed_data: dict[str, Any]) -> bytes:
    """Serialize plain nested feed data to an RSS 2.0 document.

    Args:
        feed_data: Channel fields, ``link`` and ``items`` keyed like the
            input descriptor (``pubDate``, ``itunes:*``)

    Returns:
        UTF-8 encoded RSS document

    Raises:
        FeedError: If feedgen rejects a field value
    """
    fg = FeedGenerator()
    fg.load_extension("podcast")

    try:
        _channel(fg, feed_data)
        for item in feed_data.get("items", []):
            _entry(fg, item)
        document = fg.rss_str(pretty=True)
    except (KeyError, ValueError) as e:
        raise FeedError(f"Could not render feed: {e}") from e

    logger.debug(f"Rendered feed with {len(feed_data.get('items', []))} items")
    return document

"""Data models for the podcast descriptor and the derived feed."""

from datetime import date, datetime
from email.utils import parsedate_to_datetime
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from s3podcast.utils.datetime import ensure_utc

EpisodeType = Literal["full", "trailer", "bonus"]
ExplicitFlag = Literal["yes", "no", "clean"]
ShowType = Literal["episodic", "serial"]


def _parse_date(v: Any) -> Any:
    """Accept RFC 822 dates (the usual RSS form) as well as ISO 8601."""
    if isinstance(v, str):
        try:
            return parsedate_to_datetime(v)
        except (TypeError, ValueError):
            return v
    # YAML loads bare dates such as 2024-01-15 as date objects
    if isinstance(v, date) and not isinstance(v, datetime):
        return datetime(v.year, v.month, v.day)
    return v


def _explicit_flag(v: Any) -> Any:
    if isinstance(v, bool):
        return "yes" if v else "no"
    return v


class _FeedModel(BaseModel):
    """Frozen model that accepts both field names and descriptor keys."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_feed_data(self) -> dict[str, Any]:
        """Plain nested structure keyed the way the descriptor is keyed."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ItunesOwner(_FeedModel):
    """Owner contact shown by podcast directories."""

    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)


class ItunesCategory(_FeedModel):
    """iTunes category with optional subcategory."""

    cat: str = Field(..., min_length=1)
    sub: str | None = None


class MediaItem(_FeedModel):
    """A local episode: the audio file plus its descriptive metadata."""

    local_path: Path = Field(..., alias="localPath")
    title: str = Field(..., min_length=1)
    filename: str = Field(..., description="Seed for the storage key")
    description: str = ""
    pub_date: datetime | None = Field(default=None, alias="pubDate")

    itunes_title: str | None = Field(default=None, alias="itunes:title")
    itunes_summary: str | None = Field(default=None, alias="itunes:summary")
    itunes_episode_type: EpisodeType | None = Field(default=None, alias="itunes:episodeType")
    itunes_explicit: ExplicitFlag | None = Field(default=None, alias="itunes:explicit")
    itunes_season: int | None = Field(default=None, ge=1, alias="itunes:season")

    @field_validator("pub_date", mode="before")
    @classmethod
    def parse_pub_date(cls, v: Any) -> Any:
        return _parse_date(v)

    @field_validator("pub_date")
    @classmethod
    def ensure_timezone_aware(cls, v: datetime | None) -> datetime | None:
        """Naive dates are taken to be UTC."""
        return ensure_utc(v) if v is not None else None

    @field_validator("itunes_explicit", mode="before")
    @classmethod
    def normalize_explicit(cls, v: Any) -> Any:
        return _explicit_flag(v)


class PodcastDescriptor(_FeedModel):
    """Channel metadata plus the ordered list of episodes to publish."""

    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    copyright: str | None = None
    language: str | None = None
    pub_date: datetime | None = Field(default=None, alias="pubDate")
    last_build_date: datetime | None = Field(default=None, alias="lastBuildDate")

    itunes_type: ShowType | None = Field(default=None, alias="itunes:type")
    itunes_subtitle: str | None = Field(default=None, alias="itunes:subtitle")
    itunes_summary: str | None = Field(default=None, alias="itunes:summary")
    itunes_author: str | None = Field(default=None, alias="itunes:author")
    itunes_category: list[ItunesCategory] | None = Field(default=None, alias="itunes:category")
    itunes_explicit: ExplicitFlag | None = Field(default=None, alias="itunes:explicit")
    itunes_image: str | None = Field(default=None, alias="itunes:image")
    itunes_owner: ItunesOwner | None = Field(default=None, alias="itunes:owner")

    items: list[MediaItem] = Field(default_factory=list)

    @field_validator("pub_date", "last_build_date", mode="before")
    @classmethod
    def parse_dates(cls, v: Any) -> Any:
        return _parse_date(v)

    @field_validator("pub_date", "last_build_date")
    @classmethod
    def ensure_timezone_aware(cls, v: datetime | None) -> datetime | None:
        return ensure_utc(v) if v is not None else None

    @field_validator("itunes_category", mode="before")
    @classmethod
    def normalize_category(cls, v: Any) -> Any:
        """Accept "Technology", {"cat": ...} or a list of either."""
        if v is None:
            return None
        if isinstance(v, (str, dict)):
            v = [v]
        return [{"cat": c} if isinstance(c, str) else c for c in v]

    @field_validator("itunes_explicit", mode="before")
    @classmethod
    def normalize_explicit(cls, v: Any) -> Any:
        return _explicit_flag(v)


class Enclosure(_FeedModel):
    """Downloadable media attached to a feed item.

    ``length`` carries the episode duration in seconds, not the byte size
    the RSS field conventionally holds. Published feeds already depend on
    this value, so it is kept as is.
    """

    url: str
    length: int = Field(..., ge=0)
    type: str


class PodcastFeedItem(_FeedModel):
    """One feed entry derived from an uploaded and probed MediaItem."""

    title: str
    description: str = ""
    pub_date: datetime | None = Field(default=None, alias="pubDate")
    enclosure: Enclosure

    itunes_title: str | None = Field(default=None, alias="itunes:title")
    itunes_summary: str | None = Field(default=None, alias="itunes:summary")
    itunes_episode_type: EpisodeType | None = Field(default=None, alias="itunes:episodeType")
    itunes_explicit: ExplicitFlag | None = Field(default=None, alias="itunes:explicit")
    itunes_season: int | None = Field(default=None, alias="itunes:season")
    itunes_duration: int | None = Field(default=None, alias="itunes:duration")


class FeedDescriptor(_FeedModel):
    """Channel-level feed data with its episodes, ready for serialization."""

    title: str
    description: str
    link: str
    copyright: str | None = None
    language: str | None = None
    pub_date: datetime | None = Field(default=None, alias="pubDate")
    last_build_date: datetime | None = Field(default=None, alias="lastBuildDate")

    itunes_type: ShowType | None = Field(default=None, alias="itunes:type")
    itunes_subtitle: str | None = Field(default=None, alias="itunes:subtitle")
    itunes_summary: str | None = Field(default=None, alias="itunes:summary")
    itunes_author: str | None = Field(default=None, alias="itunes:author")
    itunes_category: list[ItunesCategory] | None = Field(default=None, alias="itunes:category")
    itunes_explicit: ExplicitFlag | None = Field(default=None, alias="itunes:explicit")
    itunes_image: str | None = Field(default=None, alias="itunes:image")
    itunes_owner: ItunesOwner | None = Field(default=None, alias="itunes:owner")

    items: list[PodcastFeedItem] = Field(default_factory=list)

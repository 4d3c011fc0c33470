"""Shared fixtures for s3-podcast tests."""

from pathlib import Path
from typing import Any

import pytest

from s3podcast.feeds.models import PodcastDescriptor
from s3podcast.media.probe import Prober
from s3podcast.storage.base import PUBLIC_READ, StorageBucket
from s3podcast.utils.errors import RemoteError
from s3podcast.utils.events import EventLogger


class InMemoryBucket(StorageBucket):
    """Bucket that keeps objects in a dict and records every call."""

    def __init__(self, name: str = "test-podcast", exists: bool = False) -> None:
        self.name = name
        self.acl = PUBLIC_READ
        self.exists = exists
        self.objects: dict[str, bytes] = {}
        self.calls: list[tuple[str, ...]] = []
        self.fail_on_key: str | None = None

    async def head(self) -> dict[str, Any] | None:
        self.calls.append(("head",))
        return {"BucketRegion": "us-east-1"} if self.exists else None

    async def create(self) -> None:
        self.calls.append(("create",))
        self.exists = True

    async def upsert_object(
        self, key: str, data: bytes, content_type: str | None = None
    ) -> None:
        self.calls.append(("put", key))
        if key == self.fail_on_key:
            raise RemoteError(f"Failed to upload '{key}'", operation="put", key=key)
        self.objects[key] = data

    def count(self, operation: str) -> int:
        return sum(1 for call in self.calls if call[0] == operation)


class StubProber(Prober):
    """Prober returning canned results keyed by file name."""

    def __init__(self, results: dict[str, Any] | None = None) -> None:
        self.results = results or {}
        self.calls: list[Path] = []

    async def probe(self, path: Path) -> dict[str, Any]:
        self.calls.append(path)
        result = self.results.get(path.name, {"duration": 125.6, "format": "mp3"})
        if isinstance(result, Exception):
            raise result
        return result


class RecordingEventLogger(EventLogger):
    """Keeps every event for inspection."""

    def __init__(self) -> None:
        self.events: list[tuple[str, dict[str, Any]]] = []

    def info(self, message: str, **fields: Any) -> None:
        self.events.append((message, fields))


@pytest.fixture
def bucket() -> InMemoryBucket:
    """Empty bucket that does not exist yet."""
    return InMemoryBucket()


@pytest.fixture
def existing_bucket() -> InMemoryBucket:
    """Empty bucket that already exists."""
    return InMemoryBucket(exists=True)


@pytest.fixture
def prober() -> StubProber:
    """Prober reporting 125.6s mp3 for every file."""
    return StubProber()


@pytest.fixture
def events() -> RecordingEventLogger:
    return RecordingEventLogger()


@pytest.fixture
def audio_dir(tmp_path: Path) -> Path:
    """Directory with two small fake audio files."""
    directory = tmp_path / "audio"
    directory.mkdir()
    (directory / "ep1.mp3").write_bytes(b"ID3\x03first episode audio")
    (directory / "ep2.mp3").write_bytes(b"ID3\x03second episode audio")
    return directory


@pytest.fixture
def descriptor_dict(audio_dir: Path) -> dict[str, Any]:
    """Descriptor data in the on-disk (camelCase / itunes:) form."""
    return {
        "title": "Test Podcast",
        "description": "A podcast used in tests",
        "copyright": "2024 Test Author",
        "language": "en",
        "pubDate": "Mon, 15 Jan 2024 10:00:00 +0000",
        "lastBuildDate": "Mon, 15 Jan 2024 12:00:00 +0000",
        "itunes:type": "episodic",
        "itunes:subtitle": "Testing, in audio form",
        "itunes:summary": "Episodes about testing",
        "itunes:author": "Test Author",
        "itunes:category": "Technology",
        "itunes:explicit": False,
        "itunes:image": "https://example.com/cover.jpg",
        "itunes:owner": {"name": "Test Author", "email": "author@example.com"},
        "items": [
            {
                "localPath": str(audio_dir / "ep1.mp3"),
                "title": "Episode One!",
                "filename": "Episode One!",
                "description": "The first episode",
                "pubDate": "Mon, 08 Jan 2024 10:00:00 +0000",
                "itunes:title": "Episode One",
                "itunes:summary": "First",
                "itunes:episodeType": "full",
                "itunes:explicit": "no",
                "itunes:season": 1,
            },
            {
                "localPath": str(audio_dir / "ep2.mp3"),
                "title": "Episode Two",
                "filename": "Episode Two",
                "description": "The second episode",
                "pubDate": "Mon, 15 Jan 2024 10:00:00 +0000",
                "itunes:episodeType": "full",
                "itunes:season": 1,
            },
        ],
    }


@pytest.fixture
def descriptor(descriptor_dict: dict[str, Any]) -> PodcastDescriptor:
    """Validated two-episode descriptor."""
    return PodcastDescriptor.model_validate(descriptor_dict)

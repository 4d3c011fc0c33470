"""Tests for episode uploads."""

from pathlib import Path

import pytest

from s3podcast.feeds.models import MediaItem
from s3podcast.storage.uploader import ItemUploader
from s3podcast.utils.errors import RemoteError


def make_item(path: Path, filename: str = "Episode One!") -> MediaItem:
    return MediaItem(local_path=path, title="Episode One", filename=filename)


class TestItemUploader:
    """Tests for ItemUploader."""

    @pytest.mark.asyncio
    async def test_upload_writes_file_under_key(self, bucket, audio_dir: Path) -> None:
        """Test the whole file is written under slug + extension."""
        path = audio_dir / "ep1.mp3"

        key = await ItemUploader(bucket).upload(make_item(path))

        assert key == "episode-one-.mp3"
        assert bucket.objects[key] == path.read_bytes()

    @pytest.mark.asyncio
    async def test_upload_is_upsert(self, bucket, audio_dir: Path) -> None:
        """Test uploading twice overwrites the same key."""
        uploader = ItemUploader(bucket)
        item = make_item(audio_dir / "ep1.mp3")

        await uploader.upload(item)
        await uploader.upload(item)

        assert list(bucket.objects) == ["episode-one-.mp3"]
        assert bucket.count("put") == 2

    @pytest.mark.asyncio
    async def test_upload_does_not_touch_local_file(self, bucket, audio_dir: Path) -> None:
        """Test the local file is left as it was."""
        path = audio_dir / "ep1.mp3"
        before = path.read_bytes()

        await ItemUploader(bucket).upload(make_item(path))

        assert path.read_bytes() == before

    @pytest.mark.asyncio
    async def test_missing_file_raises_os_error(self, bucket, tmp_path: Path) -> None:
        """Test an unreadable file propagates OSError and writes nothing."""
        with pytest.raises(OSError):
            await ItemUploader(bucket).upload(make_item(tmp_path / "missing.mp3"))

        assert bucket.objects == {}

    @pytest.mark.asyncio
    async def test_remote_failure_propagates(self, bucket, audio_dir: Path) -> None:
        """Test a failed write surfaces as RemoteError."""
        bucket.fail_on_key = "episode-one-.mp3"

        with pytest.raises(RemoteError):
            await ItemUploader(bucket).upload(make_item(audio_dir / "ep1.mp3"))

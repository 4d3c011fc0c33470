"""Audio metadata extraction.

The feed needs two facts about each episode file: its duration and its
container format. Both come from ffprobe.
"""

import asyncio
import json
import logging
import math
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from s3podcast.utils.errors import ProbeError

logger = logging.getLogger(__name__)


class MediaMetadata(BaseModel):
    """Probed facts about an audio file."""

    duration: int = Field(..., ge=0, description="Duration in whole seconds")
    format: str = Field(..., description="Container format identifier, e.g. 'mp3'")


class Prober(ABC):
    """Raw probing backend."""

    @abstractmethod
    async def probe(self, path: Path) -> dict[str, Any]:
        """Return ``{"duration": float seconds, "format": str}`` for ``path``.

        Raises:
            ProbeError: If the file cannot be probed
        """


class FFprobeProber(Prober):
    """Probe files with the ffprobe executable."""

    def __init__(self, ffprobe_path: str = "ffprobe") -> None:
        self.ffprobe_path = ffprobe_path

    async def probe(self, path: Path) -> dict[str, Any]:
        return await asyncio.to_thread(self._probe_sync, path)

    def _probe_sync(self, path: Path) -> dict[str, Any]:
        """Run ffprobe and pull duration and format_name from its JSON output."""
        try:
            result = subprocess.run(
                [
                    self.ffprobe_path,
                    "-v",
                    "error",
                    "-print_format",
                    "json",
                    "-show_format",
                    str(path),
                ],
                capture_output=True,
                text=True,
                check=True,
            )
        except FileNotFoundError as e:
            raise ProbeError(
                f"{self.ffprobe_path} not found - install ffmpeg", path=str(path)
            ) from e
        except subprocess.CalledProcessError as e:
            raise ProbeError(
                f"ffprobe failed for {path}: {e.stderr.strip()}", path=str(path)
            ) from e

        try:
            fmt = json.loads(result.stdout)["format"]
            return {
                "duration": float(fmt["duration"]),
                "format": fmt["format_name"],
            }
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            raise ProbeError(
                f"Could not read duration and format for {path}: {e}", path=str(path)
            ) from e


def round_duration(seconds: float) -> int:
    """Round to the nearest second, halves rounding up (125.5 -> 126)."""
    return int(math.floor(seconds + 0.5))


class MediaProbe:
    """Extract the duration and container format of local audio files.

    Example:
        >>> probe = MediaProbe()
        >>> await probe.extract(Path("episode-1.mp3"))
        MediaMetadata(duration=126, format='mp3')
    """

    def __init__(self, prober: Prober | None = None) -> None:
        """Initialize the probe.

        Args:
            prober: Probing backend (default: FFprobeProber)
        """
        self.prober = prober or FFprobeProber()

    async def extract(self, path: Path) -> MediaMetadata:
        """Probe ``path``.

        Raises:
            ProbeError: If the file is missing or cannot be probed
        """
        if not path.is_file():
            raise ProbeError(f"Audio file not found: {path}", path=str(path))

        raw = await self.prober.probe(path)
        try:
            duration = float(raw["duration"])
            fmt = str(raw["format"])
        except (KeyError, TypeError, ValueError) as e:
            raise ProbeError(f"Incomplete probe result for {path}: {e}", path=str(path)) from e
        if not math.isfinite(duration) or duration < 0:
            raise ProbeError(f"Invalid duration {duration} for {path}", path=str(path))

        metadata = MediaMetadata(duration=round_duration(duration), format=fmt)
        logger.debug(f"Probed {path}: {metadata.duration}s, format {metadata.format}")
        return metadata

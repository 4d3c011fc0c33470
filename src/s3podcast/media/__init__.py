"""Audio metadata extraction for s3-podcast."""

from s3podcast.media.probe import FFprobeProber, MediaMetadata, MediaProbe, Prober

__all__ = [
    "FFprobeProber",
    "MediaMetadata",
    "MediaProbe",
    "Prober",
]

"""Closed mapping from probed container formats to feed MIME types."""

from enum import Enum

from s3podcast.utils.errors import UnsupportedFormatError


class AudioFormat(str, Enum):
    """Container formats that may be published in the feed."""

    MP3 = "mp3"
    OGG = "ogg"

    @property
    def mime_type(self) -> str:
        if self is AudioFormat.MP3:
            return "audio/mpeg"
        if self is AudioFormat.OGG:
            return "audio/ogg"
        raise UnsupportedFormatError(self.value)

    @classmethod
    def from_probe(cls, format: str) -> "AudioFormat":
        """Look up a probed format name.

        Raises:
            UnsupportedFormatError: If the format is not one of the members
        """
        try:
            return cls(format)
        except ValueError:
            raise UnsupportedFormatError(format) from None


def mime_type_for(format: str) -> str:
    """Return the MIME type for a probed container format."""
    return AudioFormat.from_probe(format).mime_type

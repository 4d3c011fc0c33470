"""Custom exceptions for s3-podcast."""


class S3PodcastError(Exception):
    """Base exception for all s3-podcast errors."""

    pass


class ConfigError(S3PodcastError):
    """Configuration-related errors."""

    pass


class InvalidConfigError(ConfigError):
    """Invalid configuration data."""

    pass


class DescriptorError(ConfigError):
    """Podcast descriptor file missing or invalid."""

    pass


class SyncError(S3PodcastError):
    """Errors raised while synchronizing episodes and the feed."""

    pass


class UnsupportedFormatError(SyncError):
    """Probed container format has no known MIME type."""

    def __init__(self, format: str) -> None:
        super().__init__(f"Unknown audio format: {format}")
        self.format = format


class ProbeError(SyncError):
    """Audio metadata extraction failed."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class RemoteError(SyncError):
    """Bucket or object storage operation failed."""

    def __init__(self, message: str, operation: str, key: str | None = None) -> None:
        super().__init__(message)
        self.operation = operation
        self.key = key


class FeedError(SyncError):
    """Feed document could not be rendered."""

    pass

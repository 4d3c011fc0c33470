"""Utility functions and helpers for s3-podcast."""

from s3podcast.utils.errors import (
    ConfigError,
    DescriptorError,
    FeedError,
    InvalidConfigError,
    ProbeError,
    RemoteError,
    S3PodcastError,
    SyncError,
    UnsupportedFormatError,
)
from s3podcast.utils.paths import get_config_dir, get_config_file

__all__ = [
    # Errors
    "S3PodcastError",
    "ConfigError",
    "InvalidConfigError",
    "DescriptorError",
    "FeedError",
    "SyncError",
    "UnsupportedFormatError",
    "ProbeError",
    "RemoteError",
    # Paths
    "get_config_dir",
    "get_config_file",
]

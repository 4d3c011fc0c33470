"""Configuration loading for s3-podcast."""

from s3podcast.config.manager import ConfigManager, load_descriptor
from s3podcast.config.precedence import resolve_config_value
from s3podcast.config.schema import GlobalConfig, ProbeConfig, StorageConfig

__all__ = [
    "ConfigManager",
    "GlobalConfig",
    "ProbeConfig",
    "StorageConfig",
    "load_descriptor",
    "resolve_config_value",
]

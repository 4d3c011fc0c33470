"""Configuration schema models using Pydantic."""

from typing import Literal

from pydantic import BaseModel, Field

from s3podcast.storage.base import PUBLIC_READ

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class StorageConfig(BaseModel):
    """Destination bucket configuration."""

    bucket: str | None = None  # Usually given per run with --bucket
    acl: str = PUBLIC_READ
    region: str | None = None  # If None, boto3 resolves it from the environment
    endpoint_url: str | None = None  # For S3-compatible services
    base_url: str = "https://s3.amazonaws.com"


class ProbeConfig(BaseModel):
    """Audio probing configuration."""

    ffprobe_path: str = "ffprobe"


class GlobalConfig(BaseModel):
    """Global s3-podcast configuration."""

    version: str = "1"
    log_level: LogLevel = "INFO"

    storage: StorageConfig = Field(default_factory=StorageConfig)
    probe: ProbeConfig = Field(default_factory=ProbeConfig)

"""s3-podcast: publish local podcast episodes and their RSS feed to S3."""

__version__ = "0.1.0"

"""Object storage: keys, bucket access, provisioning and uploads."""

from s3podcast.storage.base import PUBLIC_READ, StorageBucket
from s3podcast.storage.keys import FEED_KEY, object_key, public_url, slugify
from s3podcast.storage.lifecycle import BucketLifecycle
from s3podcast.storage.s3 import S3Bucket
from s3podcast.storage.uploader import ItemUploader

__all__ = [
    "FEED_KEY",
    "PUBLIC_READ",
    "BucketLifecycle",
    "ItemUploader",
    "S3Bucket",
    "StorageBucket",
    "object_key",
    "public_url",
    "slugify",
]

"""Deterministic storage keys for uploaded objects."""

import re
from pathlib import Path

FEED_KEY = "feed.rss"

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_\-]")


def slugify(name: str) -> str:
    """Replace characters outside ``[A-Za-z0-9_-]`` with ``-`` and lowercase.

    Idempotent: ``slugify(slugify(s)) == slugify(s)``.

    Examples:
        >>> slugify("Episode One!")
        'episode-one-'
    """
    return _UNSAFE_CHARS.sub("-", name).lower()


def object_key(filename: str, local_path: str | Path) -> str:
    """Key for an episode: slug of ``filename`` plus the local file's extension."""
    return f"{slugify(filename)}{Path(local_path).suffix}"


def public_url(base_url: str, bucket_name: str, key: str) -> str:
    """Public URL of an object: ``{base_url}/{bucket}/{key}``."""
    return f"{base_url.rstrip('/')}/{bucket_name}/{key}"

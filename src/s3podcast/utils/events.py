"""Structured progress events emitted during a sync run.

Events are purely observational. The orchestrator always holds an
EventLogger; when the caller has none, it gets NullEventLogger.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any

LOG_PREFIX = "(s3-podcast)"


class EventLogger(ABC):
    """Receives ``info(message, **fields)`` calls."""

    @abstractmethod
    def info(self, message: str, **fields: Any) -> None:
        """Record an informational event with structured fields."""


class NullEventLogger(EventLogger):
    """Discards every event."""

    def info(self, message: str, **fields: Any) -> None:
        pass


class LoggingEventLogger(EventLogger):
    """Forward events to a stdlib logger as ``message key=value ...`` lines.

    The raw fields are also attached to the record as ``record.fields``.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or logging.getLogger("s3podcast.sync")

    def info(self, message: str, **fields: Any) -> None:
        if fields:
            rendered = " ".join(f"{k}={v!r}" for k, v in fields.items())
            message = f"{message} {rendered}"
        self.logger.info(message, extra={"fields": fields})


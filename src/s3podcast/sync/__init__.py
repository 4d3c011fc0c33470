"""Sync pipeline for s3-podcast."""

from s3podcast.utils.events import EventLogger, LoggingEventLogger, NullEventLogger
from s3podcast.sync.orchestrator import SyncContext, SyncOrchestrator, SyncResult

__all__ = [
    "EventLogger",
    "LoggingEventLogger",
    "NullEventLogger",
    "SyncContext",
    "SyncOrchestrator",
    "SyncResult",
]

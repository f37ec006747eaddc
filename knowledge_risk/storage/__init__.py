"""
Snapshot storage layer.

Sources: ingestion collaborators exposing list_people/list_modules/list_links
Store: process-wide holder of the current snapshot with atomic replacement

Nothing here persists scans; a store lives only as long as the process.
"""

from functools import lru_cache

from .base import SnapshotSource
from .memory import InMemorySnapshotSource
from .snapshot_store import SnapshotNotLoadedError, SnapshotStore, build_snapshot


@lru_cache
def get_snapshot_store() -> SnapshotStore:
    """
    Get cached snapshot store instance (singleton).

    Returns:
        The process-wide SnapshotStore, initially empty
    """
    return SnapshotStore()


__all__ = [
    "InMemorySnapshotSource",
    "SnapshotNotLoadedError",
    "SnapshotSource",
    "SnapshotStore",
    "build_snapshot",
    "get_snapshot_store",
]

"""
Snapshot store with atomic replacement.

The store holds a reference to the current immutable Snapshot. Replacing it
swaps the reference under a lock, so a reader either sees the previous scan
or the new one, never a mix. Computations that grabbed a snapshot before a
replacement keep working against that snapshot.
"""

import threading
from typing import Optional

import structlog

from knowledge_risk.models.snapshot import Snapshot

from .base import SnapshotSource


class SnapshotNotLoadedError(RuntimeError):
    """Raised when the store is read before any snapshot was loaded."""


def build_snapshot(source: SnapshotSource) -> Snapshot:
    """
    Build a Snapshot from a source's three read operations.

    Raises:
        pydantic.ValidationError: If the records violate snapshot invariants
    """
    return Snapshot(
        people=source.list_people(),
        modules=source.list_modules(),
        links=source.list_links(),
    )


class SnapshotStore:
    """
    Thread-safe holder of the current snapshot.

    Attributes:
        logger: Structured logger

    Example:
        >>> store = SnapshotStore()
        >>> store.refresh(source)
        >>> snapshot = store.current()
    """

    def __init__(self, snapshot: Optional[Snapshot] = None):
        """
        Initialize the store.

        Args:
            snapshot: Optional initial snapshot
        """
        self._lock = threading.Lock()
        self._snapshot = snapshot
        self.logger = structlog.get_logger()

    @property
    def is_loaded(self) -> bool:
        with self._lock:
            return self._snapshot is not None

    def current(self) -> Snapshot:
        """
        The current snapshot.

        Raises:
            SnapshotNotLoadedError: If no snapshot has been loaded yet
        """
        with self._lock:
            snapshot = self._snapshot
        if snapshot is None:
            raise SnapshotNotLoadedError("No snapshot has been loaded")
        return snapshot

    def replace(self, snapshot: Snapshot) -> Optional[Snapshot]:
        """
        Atomically swap in a new snapshot.

        Args:
            snapshot: The new scan result

        Returns:
            The snapshot that was replaced, or None
        """
        with self._lock:
            previous = self._snapshot
            self._snapshot = snapshot

        self.logger.info(
            "snapshot_replaced",
            snapshot_id=snapshot.snapshot_id,
            previous_snapshot_id=previous.snapshot_id if previous else None,
            people=len(snapshot.people),
            modules=len(snapshot.modules),
            links=len(snapshot.links),
        )
        return previous

    def refresh(self, source: SnapshotSource) -> Snapshot:
        """
        Build a snapshot from a source and swap it in.

        The new snapshot is fully built and validated before the swap; if
        validation fails the current snapshot stays in place.
        """
        snapshot = build_snapshot(source)
        self.replace(snapshot)
        return snapshot

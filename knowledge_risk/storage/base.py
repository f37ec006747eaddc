"""
Abstract snapshot source interface for the Knowledge Risk Engine.

A snapshot source is the data-ingestion collaborator that hands the engine
the result of a scan. The engine only reads from it; scanning version
control or ticketing systems, scheduling scans and persisting results all
happen outside the engine.
"""

from abc import ABC, abstractmethod

from knowledge_risk.models.snapshot import DependencyLink, Module, Person


class SnapshotSource(ABC):
    """
    Abstract base class for snapshot sources.

    Implementations must return immutable collections and must return the
    same scan from all three methods until the next scan completes.
    """

    @abstractmethod
    def list_people(self) -> tuple[Person, ...]:
        """
        All people in the current scan, in scan order.

        Returns:
            Tuple of Person records
        """
        pass

    @abstractmethod
    def list_modules(self) -> tuple[Module, ...]:
        """
        All modules in the current scan, in scan order.

        Returns:
            Tuple of Module records
        """
        pass

    @abstractmethod
    def list_links(self) -> tuple[DependencyLink, ...]:
        """
        All person-to-module dependency links in the current scan.

        Returns:
            Tuple of DependencyLink records
        """
        pass

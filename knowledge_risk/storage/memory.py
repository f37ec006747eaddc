"""
In-memory snapshot source.

Holds one scan's records in tuples. Records may be given as models or as
raw mappings (snake_case or camelCase keys), which are validated on
construction.
"""

from typing import Any, Iterable, Mapping, Union

import structlog

from knowledge_risk.models.snapshot import DependencyLink, Module, Person

from .base import SnapshotSource

logger = structlog.get_logger()

PersonRecord = Union[Person, Mapping[str, Any]]
ModuleRecord = Union[Module, Mapping[str, Any]]
LinkRecord = Union[DependencyLink, Mapping[str, Any]]


class InMemorySnapshotSource(SnapshotSource):
    """
    Snapshot source backed by in-memory records.

    Example:
        >>> source = InMemorySnapshotSource(
        ...     people=[{"id": "p1", "name": "Sarah Chen", "riskScore": 5}],
        ...     modules=[],
        ...     links=[],
        ... )
        >>> source.list_people()[0].risk_score
        5
    """

    def __init__(
        self,
        people: Iterable[PersonRecord] = (),
        modules: Iterable[ModuleRecord] = (),
        links: Iterable[LinkRecord] = (),
    ):
        """
        Initialize the source, validating raw records.

        Raises:
            pydantic.ValidationError: If any record is out of range or malformed
        """
        self._people = tuple(Person.model_validate(p) for p in people)
        self._modules = tuple(Module.model_validate(m) for m in modules)
        self._links = tuple(DependencyLink.model_validate(link) for link in links)

        logger.debug(
            "memory_source_loaded",
            people=len(self._people),
            modules=len(self._modules),
            links=len(self._links),
        )

    def list_people(self) -> tuple[Person, ...]:
        return self._people

    def list_modules(self) -> tuple[Module, ...]:
        return self._modules

    def list_links(self) -> tuple[DependencyLink, ...]:
        return self._links

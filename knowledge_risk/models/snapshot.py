"""
Entity snapshot models for the Knowledge Risk Engine.

This module defines the point-in-time view of an organization produced by a
scan: the people, the modules they maintain, the knowledge each person holds
and the dependency links between people and modules.

Every model is frozen. A new scan produces an entirely new Snapshot; the
engine never mutates Person, Module or DependencyLink records in place.

Field names are snake_case in Python. Raw records from an ingestion
collaborator may use camelCase keys (``riskScore``, ``busFactor``,
``isOnlyOwner``); both spellings are accepted on input.
"""

from datetime import datetime, timezone
from typing import Any, Optional
from uuid import uuid4

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    ValidationInfo,
    field_validator,
)
from pydantic.alias_generators import to_camel

from .enums import KnowledgeLevel, LinkType, RiskLevel

ENTITY_CONFIG = ConfigDict(
    frozen=True,
    alias_generator=to_camel,
    populate_by_name=True,
    extra="ignore",
)


class KnowledgeArea(BaseModel):
    """
    A module a person knows, and how deeply.

    Attributes:
        module: Module name, matched against Module.name
        level: Depth of knowledge (primary, secondary, reviewer)
        is_only_owner: True iff no other person currently owns the module
    """

    model_config = ENTITY_CONFIG

    module: str = Field(description="Module name this knowledge refers to")
    level: KnowledgeLevel = Field(description="Depth of knowledge")
    is_only_owner: bool = Field(
        default=False,
        description="True iff no other person currently owns the module",
    )


class Person(BaseModel):
    """
    A member of the organization and the knowledge they hold.

    Attributes:
        id: Unique person identifier
        name: Display name
        role: Job title
        avatar: Short initials used as a node label, derived from name if omitted
        risk_score: 1-5, how much the organization depends on this person
        knowledge_areas: Ordered knowledge areas
        last_active: Opaque last-activity label or timestamp
    """

    model_config = ConfigDict(
        **ENTITY_CONFIG,
        json_schema_extra={
            "example": {
                "id": "p1",
                "name": "Sarah Chen",
                "role": "Senior Backend Engineer",
                "avatar": "SC",
                "riskScore": 5,
                "knowledgeAreas": [
                    {
                        "module": "Payment Service",
                        "level": "primary",
                        "isOnlyOwner": True,
                    },
                ],
                "lastActive": "2 hours ago",
            }
        },
    )

    id: str = Field(min_length=1, description="Unique person identifier")
    name: str = Field(description="Display name")
    role: str = Field(default="", description="Job title")
    avatar: Optional[str] = Field(
        default=None,
        validate_default=True,
        description="Initials shown on graph nodes",
    )
    risk_score: int = Field(
        ge=1, le=5, description="How much the organization depends on this person"
    )
    knowledge_areas: tuple[KnowledgeArea, ...] = Field(
        default=(), description="Ordered knowledge areas"
    )
    last_active: str = Field(default="", description="Last activity label")

    @field_validator("avatar")
    @classmethod
    def default_avatar_to_initials(
        cls, v: Optional[str], info: ValidationInfo
    ) -> str:
        """Derive initials from the name when no avatar is supplied."""
        if v:
            return v
        name = info.data.get("name", "")
        return "".join(part[0] for part in name.split() if part).upper()[:3]

    @property
    def first_name(self) -> str:
        """Short label used on graph nodes."""
        return self.name.split(" ")[0] if self.name else self.id


class Module(BaseModel):
    """
    A maintainable unit of the system.

    ``bus_factor`` and ``risk_level`` are supplied by the scan and treated
    as ground truth. They are expected to correlate but are never reconciled
    with each other or recomputed from ``owners``.

    Attributes:
        id: Unique module identifier
        name: Module name, referenced by KnowledgeArea.module
        bus_factor: People who can maintain it without external help
        risk_level: Scan-supplied risk tier
        owners: Person ids of the owners, in scan order, without duplicates
        concentration: Percent of recent activity by the top contributor
        last_activity: Opaque last-activity label or timestamp
        description: Free-text summary
    """

    model_config = ENTITY_CONFIG

    id: str = Field(min_length=1, description="Unique module identifier")
    name: str = Field(description="Module name")
    bus_factor: int = Field(ge=0, description="Number of qualified maintainers")
    risk_level: RiskLevel = Field(description="Scan-supplied risk tier")
    owners: tuple[str, ...] = Field(default=(), description="Owner person ids")
    concentration: int = Field(
        ge=0, le=100, description="Share of activity by the top contributor (%)"
    )
    last_activity: str = Field(default="", description="Last activity label")
    description: str = Field(default="", description="Module summary")

    @field_validator("owners")
    @classmethod
    def dedupe_owners(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Owners form a set; keep first occurrence order."""
        return tuple(dict.fromkeys(v))


class DependencyLink(BaseModel):
    """
    A weighted relationship from a person to a module.

    Attributes:
        source: Person id
        target: Module id
        strength: 1-100 dependency strength
        type: Relationship kind (owns, reviews, contributes)
    """

    model_config = ENTITY_CONFIG

    source: str = Field(description="Person id")
    target: str = Field(description="Module id")
    strength: int = Field(ge=1, le=100, description="Dependency strength")
    type: LinkType = Field(description="Relationship kind")


class Snapshot(BaseModel):
    """
    Immutable point-in-time collection of people, modules and links.

    Created once per scan and shared read-only by the simulator and the
    layout engine. Lookups are indexed at construction.

    Attributes:
        snapshot_id: Unique identifier for this scan result
        captured_at: When the scan finished
        people: All people, in scan order
        modules: All modules, in scan order
        links: All person-to-module dependency links

    Example:
        >>> snapshot = Snapshot(people=people, modules=modules, links=links)
        >>> snapshot.find_module_by_name("Payment Service").bus_factor
        1
    """

    model_config = ENTITY_CONFIG

    snapshot_id: str = Field(
        default_factory=lambda: str(uuid4()),
        description="Unique identifier for this scan result",
    )
    captured_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the scan finished",
    )
    people: tuple[Person, ...] = Field(default=(), description="All people")
    modules: tuple[Module, ...] = Field(default=(), description="All modules")
    links: tuple[DependencyLink, ...] = Field(
        default=(), description="Person-to-module dependency links"
    )

    _people_by_id: dict[str, Person] = PrivateAttr(default_factory=dict)
    _modules_by_id: dict[str, Module] = PrivateAttr(default_factory=dict)
    _modules_by_name: dict[str, Module] = PrivateAttr(default_factory=dict)

    @field_validator("people", "modules")
    @classmethod
    def validate_unique_ids(cls, v: tuple, info: ValidationInfo) -> tuple:
        """Reject snapshots where two entities share an id."""
        seen: set[str] = set()
        duplicates = []
        for entity in v:
            if entity.id in seen:
                duplicates.append(entity.id)
            seen.add(entity.id)
        if duplicates:
            raise ValueError(
                f"Duplicate {info.field_name} ids: {sorted(set(duplicates))}"
            )
        return v

    def model_post_init(self, __context: Any) -> None:
        self._people_by_id = {p.id: p for p in self.people}
        self._modules_by_id = {m.id: m for m in self.modules}
        by_name: dict[str, Module] = {}
        for module in self.modules:
            by_name.setdefault(module.name, module)
        self._modules_by_name = by_name

    def get_person(self, person_id: str) -> Optional[Person]:
        """Return the person with this id, or None."""
        return self._people_by_id.get(person_id)

    def get_module(self, module_id: str) -> Optional[Module]:
        """Return the module with this id, or None."""
        return self._modules_by_id.get(module_id)

    def find_module_by_name(self, name: str) -> Optional[Module]:
        """Resolve a knowledge-area module name. First match wins."""
        return self._modules_by_name.get(name)

    @property
    def is_empty(self) -> bool:
        return not self.people and not self.modules

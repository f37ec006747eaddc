"""
Overview and detail models for the Knowledge Risk Engine.

These are read-only summaries derived from a snapshot for dashboard-style
views: organization-wide risk counts, a person's exposure, a module's
ownership and aggregate link statistics.
"""

from pydantic import BaseModel, ConfigDict, Field

from .enums import PersonImpact, RiskLevel
from .snapshot import KnowledgeArea, Module, Person


class RiskOverview(BaseModel):
    """
    Organization-wide risk summary.

    Attributes:
        overall_bus_factor: Mean module bus factor, one decimal
        critical_modules: Modules whose stored risk level is critical
        warning_modules: Modules whose stored risk level is warning
        healthy_modules: Modules whose stored risk level is healthy
        total_people: People in the snapshot
        total_modules: Modules in the snapshot
        high_impact_people: People classified as high impact
    """

    model_config = ConfigDict(frozen=True)

    overall_bus_factor: float = Field(ge=0.0)
    critical_modules: int = Field(ge=0)
    warning_modules: int = Field(ge=0)
    healthy_modules: int = Field(ge=0)
    total_people: int = Field(ge=0)
    total_modules: int = Field(ge=0)
    high_impact_people: int = Field(ge=0)


class PersonDetail(BaseModel):
    """A person's exposure: owned modules and sole-owned knowledge."""

    model_config = ConfigDict(frozen=True)

    person: Person
    impact: PersonImpact
    owned_modules: tuple[Module, ...] = ()
    sole_owned_areas: tuple[KnowledgeArea, ...] = ()


class ModuleDetail(BaseModel):
    """A module with its owners resolved to people."""

    model_config = ConfigDict(frozen=True)

    module: Module
    owners: tuple[Person, ...] = ()
    is_single_owner: bool
    concentration_level: RiskLevel
    bus_factor_level: RiskLevel


class LinkStats(BaseModel):
    """
    Aggregate statistics over a set of links.

    Attributes:
        total_connections: Number of links
        high_strength_links: Links in the high alert tier
        average_strength: Mean strength rounded to an integer, 0 when empty
    """

    model_config = ConfigDict(frozen=True)

    total_connections: int = Field(ge=0)
    high_strength_links: int = Field(ge=0)
    average_strength: int = Field(ge=0, le=100)

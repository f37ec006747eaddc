"""
Risk Insights: Overview, Detail and Link Statistics Queries.

Read-only summaries over a snapshot for dashboard views:
- compute_risk_overview: organization-wide counts and mean bus factor
- person_detail: modules a person owns and knowledge only they hold
- module_detail: a module's owners resolved to people, with tiers
- compute_link_stats: connection counts and average strength

Tier counts in the overview use the scan-supplied ``risk_level`` of each
module; they are not recomputed from bus factor.

Version: insights_v1
"""

import math
from collections import Counter
from typing import Iterable, Union

import structlog

from knowledge_risk.models.enums import LinkTier, PersonImpact, RiskLevel
from knowledge_risk.models.insights import (
    LinkStats,
    ModuleDetail,
    PersonDetail,
    RiskOverview,
)
from knowledge_risk.models.layout import LinkRendering
from knowledge_risk.models.snapshot import DependencyLink, Snapshot

from .classifier import (
    classify_link_strength,
    classify_module_by_bus_factor,
    classify_module_by_concentration,
    classify_person_impact,
)
from .departure_simulator import PersonNotFoundError

logger = structlog.get_logger()


class UnknownModuleError(LookupError):
    """Raised when a module detail is requested for an unknown module id."""

    def __init__(self, module_id: str):
        self.module_id = module_id
        super().__init__(f"Module not found: {module_id!r}")


def compute_risk_overview(snapshot: Snapshot) -> RiskOverview:
    """
    Summarize organization-wide knowledge risk.

    Args:
        snapshot: Snapshot to summarize

    Returns:
        RiskOverview with tier counts and mean bus factor
    """
    levels = Counter(m.risk_level for m in snapshot.modules)
    bus_factors = [m.bus_factor for m in snapshot.modules]
    overall_bus_factor = (
        round(sum(bus_factors) / len(bus_factors), 1) if bus_factors else 0.0
    )
    high_impact = sum(
        1 for p in snapshot.people
        if classify_person_impact(p.risk_score) == PersonImpact.HIGH
    )

    overview = RiskOverview(
        overall_bus_factor=overall_bus_factor,
        critical_modules=levels[RiskLevel.CRITICAL],
        warning_modules=levels[RiskLevel.WARNING],
        healthy_modules=levels[RiskLevel.HEALTHY],
        total_people=len(snapshot.people),
        total_modules=len(snapshot.modules),
        high_impact_people=high_impact,
    )

    logger.debug(
        "risk_overview_computed",
        snapshot_id=snapshot.snapshot_id,
        critical_modules=overview.critical_modules,
        overall_bus_factor=overview.overall_bus_factor,
    )

    return overview


def person_detail(person_id: str, snapshot: Snapshot) -> PersonDetail:
    """
    A person's exposure in the snapshot.

    Owned modules are those whose ``owners`` include the person.
    Sole-owned areas are the knowledge areas flagged ``is_only_owner``.

    Raises:
        PersonNotFoundError: If no person with this id exists
    """
    person = snapshot.get_person(person_id)
    if person is None:
        raise PersonNotFoundError(person_id)

    return PersonDetail(
        person=person,
        impact=classify_person_impact(person.risk_score),
        owned_modules=tuple(m for m in snapshot.modules if person.id in m.owners),
        sole_owned_areas=tuple(a for a in person.knowledge_areas if a.is_only_owner),
    )


def module_detail(module_id: str, snapshot: Snapshot) -> ModuleDetail:
    """
    A module with its owners resolved to people.

    Owner ids that do not resolve to a person are dropped.

    Raises:
        UnknownModuleError: If no module with this id exists
    """
    module = snapshot.get_module(module_id)
    if module is None:
        raise UnknownModuleError(module_id)

    owners = tuple(
        person for person in (snapshot.get_person(pid) for pid in module.owners)
        if person is not None
    )

    return ModuleDetail(
        module=module,
        owners=owners,
        is_single_owner=len(module.owners) == 1,
        concentration_level=classify_module_by_concentration(module.concentration),
        bus_factor_level=classify_module_by_bus_factor(module.bus_factor),
    )


def compute_link_stats(
    links: Iterable[Union[DependencyLink, LinkRendering]],
) -> LinkStats:
    """
    Aggregate statistics over links, typically the visible ones.

    The average rounds halves up (50.5 -> 51); strengths are positive.

    Returns:
        LinkStats; average strength is 0 for an empty set
    """
    strengths = [link.strength for link in links]
    high = sum(1 for s in strengths if classify_link_strength(s) == LinkTier.HIGH)
    average = math.floor(sum(strengths) / len(strengths) + 0.5) if strengths else 0

    return LinkStats(
        total_connections=len(strengths),
        high_strength_links=high,
        average_strength=average,
    )

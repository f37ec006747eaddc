"""
Pytest configuration and shared fixtures for the Knowledge Risk Engine test suite.

Provides model factories, a snapshot builder and reusable fixtures across
all test types (unit, integration, golden, property-based).
"""

import os

import pytest

# Set testing environment BEFORE importing settings
os.environ["TESTING"] = "true"


# ---------------------------------------------------------------------------
# Pydantic model factories reused across all test suites
# ---------------------------------------------------------------------------

from knowledge_risk.config import get_settings
from knowledge_risk.models.enums import KnowledgeLevel, LinkType, RiskLevel
from knowledge_risk.models.snapshot import (
    DependencyLink,
    KnowledgeArea,
    Module,
    Person,
    Snapshot,
)
from knowledge_risk.storage.sample_data import sample_snapshot as build_sample_snapshot
from knowledge_risk.storage.snapshot_store import SnapshotStore


def make_area(
    module: str = "Payment Service",
    level: KnowledgeLevel = KnowledgeLevel.PRIMARY,
    is_only_owner: bool = False,
) -> KnowledgeArea:
    """Factory function for creating test KnowledgeArea objects."""
    return KnowledgeArea(module=module, level=level, is_only_owner=is_only_owner)


def make_person(
    person_id: str = "p1",
    name: str = "Sarah Chen",
    risk_score: int = 3,
    knowledge_areas: tuple = (),
    **overrides,
) -> Person:
    """Factory function for creating test Person objects."""
    defaults = dict(
        id=person_id,
        name=name,
        role="Engineer",
        risk_score=risk_score,
        knowledge_areas=tuple(knowledge_areas),
        last_active="2 hours ago",
    )
    defaults.update(overrides)
    return Person(**defaults)


def make_module(
    module_id: str = "m1",
    name: str = "Payment Service",
    bus_factor: int = 1,
    risk_level: RiskLevel = RiskLevel.CRITICAL,
    owners: tuple = ("p1",),
    concentration: int = 90,
    **overrides,
) -> Module:
    """Factory function for creating test Module objects."""
    defaults = dict(
        id=module_id,
        name=name,
        bus_factor=bus_factor,
        risk_level=risk_level,
        owners=tuple(owners),
        concentration=concentration,
        last_activity="1 day ago",
        description=f"{name} module",
    )
    defaults.update(overrides)
    return Module(**defaults)


def make_link(
    source: str = "p1",
    target: str = "m1",
    strength: int = 50,
    link_type: LinkType = LinkType.OWNS,
) -> DependencyLink:
    """Factory function for creating test DependencyLink objects."""
    return DependencyLink(source=source, target=target, strength=strength, type=link_type)


def make_snapshot(people=(), modules=(), links=()) -> Snapshot:
    """Factory function for creating test Snapshot objects."""
    return Snapshot(people=tuple(people), modules=tuple(modules), links=tuple(links))


def make_modules(count: int) -> list[Module]:
    """``count`` distinct healthy modules m0..m{count-1}."""
    return [
        make_module(
            module_id=f"m{i}",
            name=f"Module {i}",
            bus_factor=3,
            risk_level=RiskLevel.HEALTHY,
            owners=(),
            concentration=40,
        )
        for i in range(count)
    ]


def make_people(count: int) -> list[Person]:
    """``count`` distinct people p0..p{count-1}."""
    return [make_person(person_id=f"p{i}", name=f"Person {i}") for i in range(count)]


# ---------------------------------------------------------------------------
# Pytest fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def clear_settings_cache():
    """Settings are cached per process; request before patching env vars."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_snapshot() -> Snapshot:
    """Snapshot of the five-person, six-module sample organization."""
    return build_sample_snapshot()


@pytest.fixture
def sole_owner_snapshot() -> Snapshot:
    """One person who is the only owner of the one module they know."""
    person = make_person(
        knowledge_areas=[make_area("Payment Service", is_only_owner=True)],
        risk_score=5,
    )
    module = make_module(bus_factor=1)
    return make_snapshot(
        people=[person],
        modules=[module],
        links=[make_link(strength=95)],
    )


@pytest.fixture
def mixed_impact_snapshot() -> Snapshot:
    """A person whose departure hits one critical, one high and one low module."""
    person = make_person(
        knowledge_areas=[
            make_area("Payment Service", is_only_owner=True),
            make_area("Auth System", level=KnowledgeLevel.SECONDARY),
            make_area("Dashboard UI", level=KnowledgeLevel.REVIEWER),
        ],
    )
    modules = [
        make_module("m1", "Payment Service", bus_factor=1),
        make_module("m2", "Auth System", bus_factor=2, risk_level=RiskLevel.WARNING,
                    owners=("p1", "p2"), concentration=70),
        make_module("m3", "Dashboard UI", bus_factor=5, risk_level=RiskLevel.HEALTHY,
                    owners=("p1", "p2", "p3"), concentration=30),
    ]
    return make_snapshot(people=[person], modules=modules)


@pytest.fixture
def snapshot_store(sample_snapshot) -> SnapshotStore:
    """SnapshotStore pre-loaded with the sample snapshot."""
    return SnapshotStore(snapshot=sample_snapshot)

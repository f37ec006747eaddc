"""
Golden Path (End-to-End) Tests for the Knowledge Risk Engine.

These tests run complete workflows on the fixed sample organization: load
a snapshot from a source, summarize it, simulate departures and lay out a
filtered graph. Expected values are hand-computed from the sample data.
"""

import pytest

from knowledge_risk.engine import (
    GraphLayoutEngine,
    PersonNotFoundError,
    classify,
    compute_layout,
    compute_link_stats,
    compute_risk_overview,
    simulate_departure,
)
from knowledge_risk.engine.filters import filter_modules, graph_visible_people
from knowledge_risk.models.enums import ImpactSeverity, KnowledgeLevel, RiskLevel
from knowledge_risk.services import SimulationSession
from knowledge_risk.storage import SnapshotStore
from knowledge_risk.storage.sample_data import sample_source
from tests.conftest import make_area, make_module, make_person, make_snapshot


# ============================================================================
# Scenario 1: Single sole owner leaves
# ============================================================================


def test_golden_sole_owner_departure():
    """
    Golden path: a person who is the only owner of Payment Service leaves.

    Payment Service has bus factor 1, so the departure leaves it with no
    maintainer: one critical module and 8 + 0 + 2 = 10 weeks to recover.
    """
    person = make_person(
        knowledge_areas=[make_area("Payment Service", KnowledgeLevel.PRIMARY, is_only_owner=True)]
    )
    snapshot = make_snapshot(people=[person], modules=[make_module(bus_factor=1)])

    result = simulate_departure("p1", snapshot)

    assert len(result.affected_modules) == 1
    assert result.affected_modules[0].new_bus_factor == 0
    assert result.overall_impact == ImpactSeverity.CRITICAL
    assert result.estimated_recovery_weeks == 10
    assert result.mitigations[0] == "Assign backup owners to 1 critical module(s)"


# ============================================================================
# Scenario 2: Sample organization from source to dashboard
# ============================================================================


def test_golden_sample_organization_overview():
    """
    Golden path: load the sample source and compute the overview.

    Bus factors (1, 1, 2, 3, 2, 3) average to 2.0; two modules per tier;
    Sarah (5) and Marcus (4) are high impact.
    """
    store = SnapshotStore()
    snapshot = store.refresh(sample_source())

    overview = compute_risk_overview(snapshot)

    assert store.is_loaded
    assert overview.overall_bus_factor == 2.0
    assert (overview.critical_modules, overview.warning_modules, overview.healthy_modules) == (2, 2, 2)
    assert overview.total_people == 5
    assert overview.high_impact_people == 2


@pytest.mark.parametrize(
    "person_id,expected_modules,expected_impacts,expected_weeks",
    [
        # Payment sole-owned (critical), Auth 2 -> 1 (high), User Management unresolved
        ("p1", ["m1", "m3"], [ImpactSeverity.CRITICAL, ImpactSeverity.HIGH], 14),
        # Deployment sole-owned (critical), Infrastructure 2 -> 1 (high)
        ("p2", ["m2", "m5"], [ImpactSeverity.CRITICAL, ImpactSeverity.HIGH], 14),
        # Dashboard 3 -> 2 (medium); Design System and Analytics unresolved
        ("p3", ["m4"], [ImpactSeverity.MEDIUM], 2),
        # Auth 2 -> 1 (high), API Gateway 3 -> 2 (medium), Infrastructure 2 -> 1 (high)
        ("p5", ["m3", "m6", "m5"], [ImpactSeverity.HIGH, ImpactSeverity.MEDIUM, ImpactSeverity.HIGH], 10),
    ],
)
def test_golden_sample_departures(person_id, expected_modules, expected_impacts, expected_weeks, sample_snapshot):
    """
    Golden path: simulate each sample person's departure.

    Knowledge areas naming modules absent from the snapshot are skipped,
    and affected modules keep knowledge-area order.
    """
    result = simulate_departure(person_id, sample_snapshot)

    assert result.affected_module_ids == expected_modules
    assert [m.impact for m in result.affected_modules] == expected_impacts
    assert result.estimated_recovery_weeks == expected_weeks


def test_golden_unknown_person_is_distinguishable(sample_snapshot):
    """
    Golden path: an unknown person id is reported as not found, never as
    an empty low-impact simulation.
    """
    with pytest.raises(PersonNotFoundError, match="p42"):
        simulate_departure("p42", sample_snapshot)


# ============================================================================
# Scenario 3: Filtered dependency graph
# ============================================================================


def test_golden_critical_modules_graph(sample_snapshot):
    """
    Golden path: filter to critical modules and lay out the graph.

    Only Payment Service and Deployment Pipeline are visible, so only the
    two ownership links into them are drawn.
    """
    people = graph_visible_people(sample_snapshot.people)
    modules = filter_modules(sample_snapshot.modules, risk_level=RiskLevel.CRITICAL)

    layout = GraphLayoutEngine().build_graph(people, modules, sample_snapshot.links)
    stats = compute_link_stats(layout.links)

    assert [n.id for n in layout.nodes] == ["m1", "m2", "p1", "p2", "p3", "p4", "p5"]
    assert [(l.source, l.target) for l in layout.links] == [("p1", "m1"), ("p2", "m2")]
    assert stats.total_connections == 2
    assert stats.high_strength_links == 2
    assert stats.average_strength == 93
    assert layout.positions() == compute_layout(people, modules)


def test_golden_search_hides_links(sample_snapshot):
    """
    Golden path: searching for one person hides every other person's links.
    """
    people = graph_visible_people(sample_snapshot.people, query="sarah")
    layout = GraphLayoutEngine().build_graph(people, list(sample_snapshot.modules), sample_snapshot.links)

    assert {l.source for l in layout.links} == {"p1"}
    assert len(layout.links) == 3


# ============================================================================
# Scenario 4: Interactive simulation session
# ============================================================================


def test_golden_session_simulates_and_classifies(snapshot_store):
    """
    Golden path: select a person through a session, then classify the
    affected modules' projected bus factors.
    """
    session = SimulationSession(snapshot_store)

    result = session.simulate("p1")

    assert session.result == result
    assert session.selected_person_id == "p1"
    assert not session.is_pending
    projected = [classify("bus_factor", m.new_bus_factor) for m in result.affected_modules]
    assert projected == [RiskLevel.CRITICAL, RiskLevel.CRITICAL]

"""
Departure Simulator Demo - Knowledge Concentration Risk

Demonstrates the engine on the sample organization.

This script shows:
1. Loading a snapshot into the snapshot store
2. Computing the organization-wide risk overview
3. Simulating the departure of every person
4. Laying out the dependency graph for a filtered view

Usage:
    python demo_departure_simulator.py [person_id]
"""

import sys

from knowledge_risk.engine import (
    GraphLayoutEngine,
    PersonNotFoundError,
    compute_link_stats,
    compute_risk_overview,
)
from knowledge_risk.engine.filters import filter_modules, graph_visible_people
from knowledge_risk.models.insights import RiskOverview
from knowledge_risk.models.layout import GraphLayout
from knowledge_risk.models.simulation import SimulationResult
from knowledge_risk.services import SimulationSession
from knowledge_risk.storage import SnapshotStore
from knowledge_risk.storage.sample_data import sample_source
from knowledge_risk.utils.logging import configure_logging


def print_overview(overview: RiskOverview) -> None:
    """Pretty print the risk overview."""
    print(f"\nOverall bus factor:  {overview.overall_bus_factor}")
    print(f"Critical modules:    {overview.critical_modules}")
    print(f"Warning modules:     {overview.warning_modules}")
    print(f"Healthy modules:     {overview.healthy_modules}")
    print(f"People:              {overview.total_people}")
    print(f"High impact people:  {overview.high_impact_people}")


def print_simulation(name: str, result: SimulationResult) -> None:
    """Pretty print a departure simulation."""
    print(f"\nIf {name} leaves: {result.overall_impact.value.upper()} impact, "
          f"~{result.estimated_recovery_weeks} weeks to recover")
    for module in result.affected_modules:
        print(f"  {module.module_name:<22} bus factor "
              f"{module.current_bus_factor} -> {module.new_bus_factor}  "
              f"[{module.impact.value}]")
    print("  Mitigations:")
    for mitigation in result.mitigations:
        print(f"    - {mitigation}")


def print_layout(layout: GraphLayout) -> None:
    """Pretty print node coordinates and drawn links."""
    for node in layout.nodes:
        print(f"  {node.node_type.value:<7} {node.label:<12} "
              f"({node.x:6.2f}, {node.y:6.2f})  {node.risk.value}")
    stats = compute_link_stats(layout.links)
    print(f"  {stats.total_connections} links, "
          f"{stats.high_strength_links} high strength, "
          f"avg strength {stats.average_strength}%")


def main():
    """Main demonstration function."""
    configure_logging()

    print("\n" + "=" * 80)
    print("DEPARTURE SIMULATOR DEMO - Knowledge Concentration Risk")
    print("=" * 80 + "\n")

    print("Loading sample organization into the snapshot store...")
    store = SnapshotStore()
    snapshot = store.refresh(sample_source())

    # Demo 1: Overview
    print("\n" + "=" * 80)
    print("DEMO 1: Risk Overview")
    print("=" * 80)
    print_overview(compute_risk_overview(snapshot))

    # Demo 2: Departure simulations
    print("\n" + "=" * 80)
    print("DEMO 2: Departure Simulations")
    print("=" * 80)
    session = SimulationSession(store)
    person_ids = sys.argv[1:] or [p.id for p in snapshot.people]
    for person_id in person_ids:
        person = snapshot.get_person(person_id)
        try:
            result = session.simulate(person_id)
        except PersonNotFoundError as e:
            print(f"\n{e}")
            continue
        print_simulation(person.name, result)

    # Demo 3: Graph layout of critical modules
    print("\n" + "=" * 80)
    print("DEMO 3: Dependency Graph (critical modules only)")
    print("=" * 80 + "\n")
    engine = GraphLayoutEngine.from_settings()
    layout = engine.build_graph(
        graph_visible_people(snapshot.people),
        filter_modules(snapshot.modules, risk_level="critical"),
        snapshot.links,
    )
    print_layout(layout)

    print("\n" + "=" * 80)
    print("Demo complete!")
    print("=" * 80 + "\n")


if __name__ == "__main__":
    main()

"""
Knowledge Risk Engine core components.

This package contains the pure computations behind the knowledge
concentration views:

- Risk classification: bus factor, concentration, person impact and link tiers
- Departure simulation: "what breaks if this person leaves"
- Graph layout: deterministic two-ring placement of people and modules
- Insights: overview counts, person/module details and link statistics
- Filters: search, tier filters and sorting for visible sets

All engine components are designed for:
- Determinism (identical inputs give identical outputs)
- Immutability (snapshots are read, never modified)
- Comprehensive observability (structured logging)
- Type safety (complete Pydantic validation)
"""

__version__ = "1.0.0"

__all__ = [
    "DepartureSimulator",
    "GraphLayoutEngine",
    "PersonNotFoundError",
    "UnknownModuleError",
    "classify",
    "classify_link_strength",
    "classify_module_by_bus_factor",
    "classify_module_by_concentration",
    "classify_person_impact",
    "compute_layout",
    "compute_link_stats",
    "compute_risk_overview",
    "module_detail",
    "person_detail",
    "simulate_departure",
]

from knowledge_risk.engine.classifier import (
    classify,
    classify_link_strength,
    classify_module_by_bus_factor,
    classify_module_by_concentration,
    classify_person_impact,
)
from knowledge_risk.engine.departure_simulator import (
    DepartureSimulator,
    PersonNotFoundError,
    simulate_departure,
)
from knowledge_risk.engine.insights import (
    UnknownModuleError,
    compute_link_stats,
    compute_risk_overview,
    module_detail,
    person_detail,
)
from knowledge_risk.engine.layout import GraphLayoutEngine, compute_layout

"""
Pydantic v2 data models for the Knowledge Risk Engine.

This package contains all Pydantic models used throughout the engine for
type-safe validation of snapshots and for the results the engine returns.

Model Organization:
    - enums: Enumeration types for consistent classification
    - snapshot: People, modules, knowledge areas, links and the snapshot
    - simulation: Departure simulation results and requests
    - layout: Graph layout nodes, links and radii
    - insights: Overview, detail and link statistics summaries

Usage:
    >>> from knowledge_risk.models import Snapshot
    >>> snapshot = Snapshot.model_validate({
    ...     "people": [...],
    ...     "modules": [...],
    ...     "links": [...],
    ... })
"""

# Enumerations
from .enums import (
    ClassificationKind,
    ImpactSeverity,
    KnowledgeLevel,
    LinkTier,
    LinkType,
    NodeType,
    PersonImpact,
    RiskLevel,
)

# Snapshot models
from .snapshot import DependencyLink, KnowledgeArea, Module, Person, Snapshot

# Simulation models
from .simulation import AffectedModule, SimulationRequest, SimulationResult

# Layout models
from .layout import GraphLayout, LayoutRadii, LinkRendering, NodePosition, Point

# Insight models
from .insights import LinkStats, ModuleDetail, PersonDetail, RiskOverview

__all__ = [
    # Enums
    "ClassificationKind",
    "ImpactSeverity",
    "KnowledgeLevel",
    "LinkTier",
    "LinkType",
    "NodeType",
    "PersonImpact",
    "RiskLevel",
    # Snapshot
    "DependencyLink",
    "KnowledgeArea",
    "Module",
    "Person",
    "Snapshot",
    # Simulation
    "AffectedModule",
    "SimulationRequest",
    "SimulationResult",
    # Layout
    "GraphLayout",
    "LayoutRadii",
    "LinkRendering",
    "NodePosition",
    "Point",
    # Insights
    "LinkStats",
    "ModuleDetail",
    "PersonDetail",
    "RiskOverview",
]

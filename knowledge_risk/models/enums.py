"""
Enumeration types for the Knowledge Risk Engine.

This module defines all enum types used across the engine for type safety
and consistent validation. All enums inherit from str to ensure JSON
serialization compatibility.
"""

from enum import Enum


class RiskLevel(str, Enum):
    """
    Risk tier of a module.

    Used both for the tier stored on each module by the scan and for the
    tiers computed by the classifier from bus factor or concentration.
    """

    CRITICAL = "critical"
    WARNING = "warning"
    HEALTHY = "healthy"


class PersonImpact(str, Enum):
    """
    How much the organization depends on a single person.

    Derived from the person's 1-5 risk score.
    """

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class KnowledgeLevel(str, Enum):
    """Depth of a person's knowledge of a module."""

    PRIMARY = "primary"
    SECONDARY = "secondary"
    REVIEWER = "reviewer"


class LinkType(str, Enum):
    """Kind of relationship between a person and a module."""

    OWNS = "owns"
    REVIEWS = "reviews"
    CONTRIBUTES = "contributes"


class LinkTier(str, Enum):
    """
    Visual alert tier of a dependency link, derived from its strength.

    HIGH links are drawn in the alert colour, MEDIUM in the warning
    colour and LOW in the muted colour.
    """

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ImpactSeverity(str, Enum):
    """
    Ordinal severity of a departure's consequences.

    Ordered CRITICAL > HIGH > MEDIUM > LOW. Use ``rank`` to compare.
    """

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        """Numeric rank, higher is more severe."""
        return _SEVERITY_RANK[self]


_SEVERITY_RANK = {
    ImpactSeverity.LOW: 0,
    ImpactSeverity.MEDIUM: 1,
    ImpactSeverity.HIGH: 2,
    ImpactSeverity.CRITICAL: 3,
}


class ClassificationKind(str, Enum):
    """Scales exposed by the risk classifier."""

    BUS_FACTOR = "bus_factor"
    CONCENTRATION = "concentration"
    PERSON_IMPACT = "person_impact"
    LINK_STRENGTH = "link_strength"


class NodeType(str, Enum):
    """Kind of node placed by the graph layout engine."""

    PERSON = "person"
    MODULE = "module"

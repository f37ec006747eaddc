"""
Risk Classifier: Tier Thresholds for Modules, People and Links.

Pure functions mapping raw numeric fields to tiered labels. Every view that
shows a tier goes through these functions so all callers agree on the
boundaries.

Classification thresholds:
- Bus factor: CRITICAL <= 1, WARNING == 2, HEALTHY >= 3
- Concentration: CRITICAL >= 80%, WARNING >= 60%, HEALTHY below
- Person risk score: HIGH >= 4, MEDIUM == 3, LOW below
- Link strength: HIGH >= 80, MEDIUM >= 50, LOW below

Out-of-range inputs (for example a concentration above 100) are a snapshot
data-quality problem and are rejected at ingestion by the snapshot models,
not here. The classifiers themselves never raise for numeric input.

Version: classifier_v1
"""

from typing import Union

from knowledge_risk.models.enums import (
    ClassificationKind,
    LinkTier,
    PersonImpact,
    RiskLevel,
)

Tier = Union[RiskLevel, PersonImpact, LinkTier]

# Minimum values for each tier, checked most severe first
BUS_FACTOR_THRESHOLDS = {
    "WARNING": 2,
    "HEALTHY": 3,
}

CONCENTRATION_THRESHOLDS = {
    "CRITICAL": 80,
    "WARNING": 60,
}

PERSON_IMPACT_THRESHOLDS = {
    "HIGH": 4,
    "MEDIUM": 3,
}

LINK_STRENGTH_THRESHOLDS = {
    "HIGH": 80,
    "MEDIUM": 50,
}


def classify_module_by_bus_factor(bus_factor: int) -> RiskLevel:
    """
    Classify a module by how many people can maintain it.

    A bus factor of 0 means nobody can; it is treated as critical.

    Args:
        bus_factor: Number of qualified maintainers

    Returns:
        RiskLevel tier
    """
    if bus_factor >= BUS_FACTOR_THRESHOLDS["HEALTHY"]:
        return RiskLevel.HEALTHY
    if bus_factor >= BUS_FACTOR_THRESHOLDS["WARNING"]:
        return RiskLevel.WARNING
    return RiskLevel.CRITICAL


def classify_module_by_concentration(concentration: int) -> RiskLevel:
    """
    Classify a module by the top contributor's share of recent activity.

    Args:
        concentration: Percent of activity by the top contributor

    Returns:
        RiskLevel tier
    """
    if concentration >= CONCENTRATION_THRESHOLDS["CRITICAL"]:
        return RiskLevel.CRITICAL
    if concentration >= CONCENTRATION_THRESHOLDS["WARNING"]:
        return RiskLevel.WARNING
    return RiskLevel.HEALTHY


def classify_person_impact(risk_score: int) -> PersonImpact:
    """
    Classify how much the organization depends on a person.

    Args:
        risk_score: The person's 1-5 risk score

    Returns:
        PersonImpact tier
    """
    if risk_score >= PERSON_IMPACT_THRESHOLDS["HIGH"]:
        return PersonImpact.HIGH
    if risk_score >= PERSON_IMPACT_THRESHOLDS["MEDIUM"]:
        return PersonImpact.MEDIUM
    return PersonImpact.LOW


def classify_link_strength(strength: int) -> LinkTier:
    """Colour tier of a dependency link."""
    if strength >= LINK_STRENGTH_THRESHOLDS["HIGH"]:
        return LinkTier.HIGH
    if strength >= LINK_STRENGTH_THRESHOLDS["MEDIUM"]:
        return LinkTier.MEDIUM
    return LinkTier.LOW


def person_impact_risk_level(impact: PersonImpact) -> RiskLevel:
    """Map a person's impact tier onto the module colour scale."""
    return _PERSON_IMPACT_COLOURS[impact]


_PERSON_IMPACT_COLOURS = {
    PersonImpact.HIGH: RiskLevel.CRITICAL,
    PersonImpact.MEDIUM: RiskLevel.WARNING,
    PersonImpact.LOW: RiskLevel.HEALTHY,
}

_CLASSIFIERS = {
    ClassificationKind.BUS_FACTOR: classify_module_by_bus_factor,
    ClassificationKind.CONCENTRATION: classify_module_by_concentration,
    ClassificationKind.PERSON_IMPACT: classify_person_impact,
    ClassificationKind.LINK_STRENGTH: classify_link_strength,
}


def classify(kind: Union[ClassificationKind, str], value: int) -> Tier:
    """
    Classify a value on one of the named scales.

    Args:
        kind: Which scale to use (enum member or its string value)
        value: Raw numeric value

    Returns:
        The tier on that scale

    Raises:
        ValueError: If kind is not a known scale

    Example:
        >>> classify("concentration", 94)
        <RiskLevel.CRITICAL: 'critical'>
    """
    return _CLASSIFIERS[ClassificationKind(kind)](value)

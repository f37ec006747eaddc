"""
View filters that produce the ordered visible sets handed to the layout
engine and to list views.

Searches are case-insensitive substring matches. Sorting is stable, so
ties keep snapshot order.
"""

from typing import Iterable, Optional, Union

from knowledge_risk.models.enums import RiskLevel
from knowledge_risk.models.snapshot import Module, Person

MODULE_SORT_KEYS = {
    "name": lambda m: m.name.lower(),
    "bus_factor": lambda m: m.bus_factor,
    "concentration": lambda m: m.concentration,
}

PERSON_SORT_KEYS = {
    "name": lambda p: p.name.lower(),
    "risk_score": lambda p: p.risk_score,
}


def _matches(query: str, *fields: str) -> bool:
    needle = query.strip().lower()
    if not needle:
        return True
    return any(needle in field.lower() for field in fields)


def filter_modules(
    modules: Iterable[Module],
    risk_level: Optional[Union[RiskLevel, str]] = None,
    query: str = "",
) -> list[Module]:
    """
    Modules matching a stored risk level and a search query.

    Args:
        modules: Candidate modules, in display order
        risk_level: Keep only this tier; None or "all" keeps every tier
        query: Matched against name and description

    Returns:
        Matching modules, order preserved
    """
    level = None
    if risk_level is not None and risk_level != "all":
        level = RiskLevel(risk_level)
    return [
        m for m in modules
        if (level is None or m.risk_level == level)
        and _matches(query, m.name, m.description)
    ]


def filter_people(people: Iterable[Person], query: str = "") -> list[Person]:
    """People whose name or role matches the query, order preserved."""
    return [p for p in people if _matches(query, p.name, p.role)]


def graph_visible_people(people: Iterable[Person], query: str = "") -> list[Person]:
    """People shown on the dependency graph: the query matches names only."""
    return [p for p in people if _matches(query, p.name)]


def sort_modules(
    modules: Iterable[Module], by: str = "bus_factor", descending: bool = False
) -> list[Module]:
    """
    Sort modules by name, bus_factor or concentration.

    Raises:
        ValueError: If ``by`` is not a known sort key
    """
    if by not in MODULE_SORT_KEYS:
        raise ValueError(
            f"Unknown module sort key {by!r}; expected one of {sorted(MODULE_SORT_KEYS)}"
        )
    return sorted(modules, key=MODULE_SORT_KEYS[by], reverse=descending)


def sort_people(
    people: Iterable[Person], by: str = "risk_score", descending: bool = True
) -> list[Person]:
    """
    Sort people by name or risk_score.

    Raises:
        ValueError: If ``by`` is not a known sort key
    """
    if by not in PERSON_SORT_KEYS:
        raise ValueError(
            f"Unknown person sort key {by!r}; expected one of {sorted(PERSON_SORT_KEYS)}"
        )
    return sorted(people, key=PERSON_SORT_KEYS[by], reverse=descending)

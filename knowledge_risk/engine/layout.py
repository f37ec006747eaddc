"""
Graph Layout Engine: Deterministic Two-Ring Placement.

This module positions a filtered set of people and modules for the
dependency graph view and selects the links to draw between them. The
output is plain coordinates and link weights; rendering technology is the
caller's concern.

Layout:
- Modules on the inner ring: angle(i) = (i / M) * 2pi - pi/2 + pi/M
  (shifted half a step so module nodes sit between people spokes)
- People on the outer ring: angle(i) = (i / P) * 2pi - pi/2
- An empty ring is simply empty

Links are drawn only when both the person and the module are visible.
Visual weight grows with strength: stroke width = max(1, strength / 30),
opacity = strength / 100, colour tier from classify_link_strength.

The layout is recomputed from scratch for every visible set. Identical
inputs in identical order give identical coordinates; there is no
positional continuity between different visible sets.

Version: layout_v1
"""

import math
from typing import Iterable, Optional, Sequence

import networkx as nx
import structlog

from knowledge_risk.config import get_settings
from knowledge_risk.models.enums import NodeType
from knowledge_risk.models.layout import (
    GraphLayout,
    LayoutRadii,
    LinkRendering,
    NodePosition,
    Point,
)
from knowledge_risk.models.snapshot import DependencyLink, Module, Person

from .classifier import (
    classify_link_strength,
    classify_person_impact,
    person_impact_risk_level,
)

# Layout geometry on a 100x100 canvas
DEFAULT_CENTER: Point = (50.0, 50.0)
DEFAULT_PERSON_RADIUS = 38.0
DEFAULT_MODULE_RADIUS = 18.0
# Ring start angle: 12 o'clock
RING_PHASE = -math.pi / 2

# Link visual weight
STROKE_WIDTH_DIVISOR = 30.0
MIN_STROKE_WIDTH = 1.0
MAX_STRENGTH = 100.0


def ring_angle(index: int, total: int, half_step: bool = False) -> float:
    """
    Angle of slot ``index`` of ``total`` evenly spaced slots.

    Args:
        index: Slot position, 0-based
        total: Number of slots on the ring (must be > 0)
        half_step: Shift by half a slot (module ring)

    Returns:
        Angle in radians
    """
    angle = (index / total) * 2 * math.pi + RING_PHASE
    if half_step:
        angle += math.pi / total
    return angle


def ring_positions(
    count: int, center: Point, radius: float, half_step: bool = False
) -> list[tuple[float, float, float]]:
    """(x, y, angle) for ``count`` slots on one ring; empty when count is 0."""
    cx, cy = center
    positions = []
    for i in range(count):
        angle = ring_angle(i, count, half_step=half_step)
        positions.append(
            (cx + radius * math.cos(angle), cy + radius * math.sin(angle), angle)
        )
    return positions


def build_knowledge_graph(
    people: Iterable[Person],
    modules: Iterable[Module],
    links: Iterable[DependencyLink],
) -> nx.MultiGraph:
    """
    Bipartite person/module graph with one edge per dependency link.

    Nodes are keyed ``(NodeType, id)`` so a person and a module may share
    an id. Edges keep the link and its input position under ``link`` and
    ``order``.
    """
    graph = nx.MultiGraph()
    graph.add_nodes_from(((NodeType.PERSON, p.id) for p in people), bipartite=0)
    graph.add_nodes_from(((NodeType.MODULE, m.id) for m in modules), bipartite=1)
    for order, link in enumerate(links):
        graph.add_edge(
            (NodeType.PERSON, link.source),
            (NodeType.MODULE, link.target),
            link=link,
            order=order,
        )
    return graph


def render_link(link: DependencyLink) -> LinkRendering:
    """Visual weight and colour tier of one link."""
    return LinkRendering(
        source=link.source,
        target=link.target,
        strength=link.strength,
        type=link.type,
        tier=classify_link_strength(link.strength),
        stroke_width=max(MIN_STROKE_WIDTH, link.strength / STROKE_WIDTH_DIVISOR),
        opacity=link.strength / MAX_STRENGTH,
    )


class GraphLayoutEngine:
    """
    Computes two-ring layouts for visible people and modules.

    Attributes:
        center: Layout center point
        radii: Ring radii (people outside, modules inside)
        logger: Structured logger

    Example:
        >>> engine = GraphLayoutEngine()
        >>> layout = engine.build_graph(people, modules, snapshot.links)
        >>> layout.positions()["m1"]
        (50.0, 32.0)
    """

    def __init__(
        self,
        center: Point = DEFAULT_CENTER,
        radii: Optional[LayoutRadii] = None,
    ):
        """
        Initialize the layout engine.

        Args:
            center: Layout center point (default: (50, 50))
            radii: Ring radii (default: people 38, modules 18)
        """
        self.center = (float(center[0]), float(center[1]))
        self.radii = radii or LayoutRadii(
            person=DEFAULT_PERSON_RADIUS, module=DEFAULT_MODULE_RADIUS
        )
        self.logger = structlog.get_logger()

    @classmethod
    def from_settings(cls) -> "GraphLayoutEngine":
        """Build an engine from the configured center and radii."""
        settings = get_settings()
        return cls(
            center=settings.layout_center,
            radii=LayoutRadii(
                person=settings.layout_person_radius,
                module=settings.layout_module_radius,
            ),
        )

    def place_nodes(
        self,
        people: Sequence[Person],
        modules: Sequence[Module],
    ) -> list[NodePosition]:
        """
        Place modules on the inner ring and people on the outer ring.

        Args:
            people: Visible people, in display order
            modules: Visible modules, in display order

        Returns:
            Module nodes then person nodes
        """
        nodes = []

        module_slots = ring_positions(
            len(modules), self.center, self.radii.module, half_step=True
        )
        for module, (x, y, angle) in zip(modules, module_slots):
            nodes.append(NodePosition(
                id=module.id,
                node_type=NodeType.MODULE,
                label=module.name.split(" ")[0],
                x=x,
                y=y,
                angle=angle,
                risk=module.risk_level,
            ))

        person_slots = ring_positions(len(people), self.center, self.radii.person)
        for person, (x, y, angle) in zip(people, person_slots):
            nodes.append(NodePosition(
                id=person.id,
                node_type=NodeType.PERSON,
                label=person.first_name,
                x=x,
                y=y,
                angle=angle,
                risk=person_impact_risk_level(
                    classify_person_impact(person.risk_score)
                ),
            ))

        return nodes

    def visible_links(
        self,
        people: Sequence[Person],
        modules: Sequence[Module],
        links: Iterable[DependencyLink],
    ) -> list[DependencyLink]:
        """
        Links whose person and module are both visible, in input order.
        """
        graph = build_knowledge_graph(people, modules, links)
        visible_nodes = [(NodeType.PERSON, p.id) for p in people]
        visible_nodes += [(NodeType.MODULE, m.id) for m in modules]
        subgraph = graph.subgraph(visible_nodes)
        edges = sorted(
            subgraph.edges(data=True), key=lambda edge: edge[2]["order"]
        )
        return [data["link"] for _, _, data in edges]

    def build_graph(
        self,
        people: Sequence[Person],
        modules: Sequence[Module],
        links: Iterable[DependencyLink] = (),
    ) -> GraphLayout:
        """
        Compute the complete layout for a visible set.

        Args:
            people: Visible people, in display order
            modules: Visible modules, in display order
            links: All candidate links (typically snapshot.links)

        Returns:
            GraphLayout with placed nodes and drawable links
        """
        nodes = self.place_nodes(people, modules)
        rendered = [render_link(link) for link in self.visible_links(people, modules, links)]

        self.logger.debug(
            "layout_computed",
            people=len(people),
            modules=len(modules),
            links=len(rendered),
        )

        return GraphLayout(
            nodes=tuple(nodes),
            links=tuple(rendered),
            center=self.center,
            radii=self.radii,
        )

    def compute_layout(
        self,
        people: Sequence[Person],
        modules: Sequence[Module],
    ) -> dict[str, Point]:
        """
        Mapping of entity id to (x, y) for the visible set.

        A person sharing an id with a module overwrites the module's entry;
        each overwrite is logged as ``layout_id_collision``. Use build_graph
        for typed nodes.
        """
        positions: dict[str, Point] = {}
        for node in self.place_nodes(people, modules):
            if node.id in positions:
                self.logger.warning(
                    "layout_id_collision",
                    node_id=node.id,
                    kept_type=node.node_type.value,
                )
            positions[node.id] = (node.x, node.y)
        return positions


def compute_layout(
    visible_people: Sequence[Person],
    visible_modules: Sequence[Module],
    center: Point = DEFAULT_CENTER,
    radii: Optional[LayoutRadii] = None,
) -> dict[str, Point]:
    """
    Compute node coordinates for the visible people and modules.

    Returns an empty mapping when both sequences are empty.
    """
    return GraphLayoutEngine(center=center, radii=radii).compute_layout(
        visible_people, visible_modules
    )

"""
Graph layout models for the Knowledge Risk Engine.

Coordinates are plain floats in the caller's coordinate space; the default
layout uses a 100x100 canvas centered on (50, 50). Rendering technology is
not assumed.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .enums import LinkTier, LinkType, NodeType, RiskLevel

Point = tuple[float, float]


class LayoutRadii(BaseModel):
    """
    Ring radii for the two-ring layout.

    People sit on the outer ring, modules on the inner ring.
    """

    model_config = ConfigDict(frozen=True)

    person: float = Field(gt=0.0, description="Outer (people) ring radius")
    module: float = Field(gt=0.0, description="Inner (modules) ring radius")

    @model_validator(mode="after")
    def validate_ring_order(self) -> "LayoutRadii":
        """The people ring must enclose the module ring."""
        if self.person <= self.module:
            raise ValueError(
                f"Person radius ({self.person}) must be greater than "
                f"module radius ({self.module})"
            )
        return self


class NodePosition(BaseModel):
    """
    A placed person or module node.

    Attributes:
        id: Entity id
        node_type: person or module
        label: Short display label
        x: Horizontal coordinate
        y: Vertical coordinate
        angle: Placement angle in radians
        risk: Colour tier of the node
    """

    model_config = ConfigDict(frozen=True)

    id: str
    node_type: NodeType
    label: str
    x: float
    y: float
    angle: float
    risk: RiskLevel


class LinkRendering(BaseModel):
    """
    A drawable dependency link between two visible nodes.

    Attributes:
        source: Person id
        target: Module id
        strength: 1-100 dependency strength
        type: Relationship kind
        tier: Colour tier from strength
        stroke_width: Line thickness, monotonic in strength
        opacity: Line opacity in (0, 1], monotonic in strength
    """

    model_config = ConfigDict(frozen=True)

    source: str
    target: str
    strength: int = Field(ge=1, le=100)
    type: LinkType
    tier: LinkTier
    stroke_width: float = Field(ge=1.0)
    opacity: float = Field(gt=0.0, le=1.0)


class GraphLayout(BaseModel):
    """
    Complete layout of a visible node set.

    Attributes:
        nodes: Module nodes then person nodes, each in input order
        links: Visible links, in snapshot order
        center: Layout center point
        radii: Ring radii used
    """

    model_config = ConfigDict(frozen=True)

    nodes: tuple[NodePosition, ...] = ()
    links: tuple[LinkRendering, ...] = ()
    center: Point
    radii: LayoutRadii

    def positions(self) -> dict[str, Point]:
        """Mapping of node id to (x, y)."""
        return {node.id: (node.x, node.y) for node in self.nodes}

    @property
    def is_empty(self) -> bool:
        return not self.nodes

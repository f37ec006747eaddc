"""
Sample organization used by the demo and the golden-path tests.

Five people and six modules with a mix of sole-owned, shared and healthy
modules. Records use the camelCase keys an ingestion collaborator would
hand over.
"""

from knowledge_risk.models.snapshot import Snapshot

from .memory import InMemorySnapshotSource
from .snapshot_store import build_snapshot

SAMPLE_PEOPLE = [
    {
        "id": "p1",
        "name": "Sarah Chen",
        "role": "Senior Backend Engineer",
        "avatar": "SC",
        "riskScore": 5,
        "knowledgeAreas": [
            {"module": "Payment Service", "level": "primary", "isOnlyOwner": True},
            {"module": "Auth System", "level": "primary", "isOnlyOwner": False},
            {"module": "User Management", "level": "secondary", "isOnlyOwner": False},
        ],
        "lastActive": "2 hours ago",
    },
    {
        "id": "p2",
        "name": "Marcus Johnson",
        "role": "DevOps Lead",
        "avatar": "MJ",
        "riskScore": 4,
        "knowledgeAreas": [
            {"module": "Deployment Pipeline", "level": "primary", "isOnlyOwner": True},
            {"module": "Infrastructure", "level": "primary", "isOnlyOwner": False},
            {"module": "Monitoring", "level": "secondary", "isOnlyOwner": False},
        ],
        "lastActive": "1 day ago",
    },
    {
        "id": "p3",
        "name": "Emily Rodriguez",
        "role": "Frontend Lead",
        "avatar": "ER",
        "riskScore": 3,
        "knowledgeAreas": [
            {"module": "Dashboard UI", "level": "primary", "isOnlyOwner": False},
            {"module": "Design System", "level": "primary", "isOnlyOwner": False},
            {"module": "Analytics", "level": "reviewer", "isOnlyOwner": False},
        ],
        "lastActive": "5 hours ago",
    },
    {
        "id": "p4",
        "name": "David Kim",
        "role": "Full Stack Developer",
        "avatar": "DK",
        "riskScore": 2,
        "knowledgeAreas": [
            {"module": "User Management", "level": "secondary", "isOnlyOwner": False},
            {"module": "Notifications", "level": "primary", "isOnlyOwner": False},
            {"module": "API Gateway", "level": "reviewer", "isOnlyOwner": False},
        ],
        "lastActive": "3 hours ago",
    },
    {
        "id": "p5",
        "name": "Anna Weber",
        "role": "Backend Engineer",
        "avatar": "AW",
        "riskScore": 2,
        "knowledgeAreas": [
            {"module": "Auth System", "level": "secondary", "isOnlyOwner": False},
            {"module": "API Gateway", "level": "primary", "isOnlyOwner": False},
            {"module": "Infrastructure", "level": "reviewer", "isOnlyOwner": False},
        ],
        "lastActive": "6 hours ago",
    },
]

SAMPLE_MODULES = [
    {
        "id": "m1",
        "name": "Payment Service",
        "busFactor": 1,
        "riskLevel": "critical",
        "owners": ["p1"],
        "lastActivity": "2 hours ago",
        "concentration": 94,
        "description": "Handles all payment processing, subscription management, and billing logic.",
    },
    {
        "id": "m2",
        "name": "Deployment Pipeline",
        "busFactor": 1,
        "riskLevel": "critical",
        "owners": ["p2"],
        "lastActivity": "1 day ago",
        "concentration": 88,
        "description": "CI/CD infrastructure, deployment automation, and release management.",
    },
    {
        "id": "m3",
        "name": "Auth System",
        "busFactor": 2,
        "riskLevel": "warning",
        "owners": ["p1", "p5"],
        "lastActivity": "5 hours ago",
        "concentration": 72,
        "description": "User authentication, session management, and security protocols.",
    },
    {
        "id": "m4",
        "name": "Dashboard UI",
        "busFactor": 3,
        "riskLevel": "healthy",
        "owners": ["p3", "p4", "p5"],
        "lastActivity": "3 hours ago",
        "concentration": 45,
        "description": "Main user interface, component library, and user experience.",
    },
    {
        "id": "m5",
        "name": "Infrastructure",
        "busFactor": 2,
        "riskLevel": "warning",
        "owners": ["p2", "p5"],
        "lastActivity": "1 day ago",
        "concentration": 68,
        "description": "Cloud resources, networking, and infrastructure as code.",
    },
    {
        "id": "m6",
        "name": "API Gateway",
        "busFactor": 3,
        "riskLevel": "healthy",
        "owners": ["p4", "p5"],
        "lastActivity": "4 hours ago",
        "concentration": 52,
        "description": "Request routing, rate limiting, and API management.",
    },
]

SAMPLE_LINKS = [
    {"source": "p1", "target": "m1", "strength": 95, "type": "owns"},
    {"source": "p1", "target": "m3", "strength": 70, "type": "owns"},
    {"source": "p1", "target": "m4", "strength": 25, "type": "contributes"},
    {"source": "p2", "target": "m2", "strength": 90, "type": "owns"},
    {"source": "p2", "target": "m5", "strength": 75, "type": "owns"},
    {"source": "p3", "target": "m4", "strength": 80, "type": "owns"},
    {"source": "p3", "target": "m6", "strength": 30, "type": "reviews"},
    {"source": "p4", "target": "m4", "strength": 55, "type": "contributes"},
    {"source": "p4", "target": "m6", "strength": 60, "type": "owns"},
    {"source": "p5", "target": "m3", "strength": 50, "type": "contributes"},
    {"source": "p5", "target": "m5", "strength": 40, "type": "contributes"},
    {"source": "p5", "target": "m6", "strength": 55, "type": "owns"},
]


def sample_source() -> InMemorySnapshotSource:
    """Snapshot source over the sample organization."""
    return InMemorySnapshotSource(
        people=SAMPLE_PEOPLE,
        modules=SAMPLE_MODULES,
        links=SAMPLE_LINKS,
    )


def sample_snapshot() -> Snapshot:
    """A fresh snapshot of the sample organization."""
    return build_snapshot(sample_source())

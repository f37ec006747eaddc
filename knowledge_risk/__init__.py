"""
Knowledge Risk Engine.

Models knowledge concentration risk: which people hold exclusive or
near-exclusive knowledge of which modules, and what happens if a person
becomes unavailable.

Entry points:
    >>> from knowledge_risk.engine import classify, compute_layout, simulate_departure
"""

__version__ = "0.1.0"

"""
Caller-side services.
Services orchestrate the stateless engine for interactive callers.
"""

from .simulation_session import SimulationSession

__all__ = ["SimulationSession"]

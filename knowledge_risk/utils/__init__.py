"""Utility modules for logging."""

from knowledge_risk.utils.logging import configure_logging

__all__ = ["configure_logging"]

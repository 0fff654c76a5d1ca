"""
Adapters layer - External integrations (scheduling API).
"""

from .scheduling_client import SchedulingClient
from .mock_scheduling_client import MockSchedulingClient

__all__ = ["SchedulingClient", "MockSchedulingClient"]

"""Terminal host for graph components."""

from .dashboard import GraphDashboard
from .sources import BurstSource, WaveSource

__all__ = ["GraphDashboard", "BurstSource", "WaveSource"]

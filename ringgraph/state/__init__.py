"""State management for graph components."""

from .graph_state import GraphState
from .registry import IdentityRegistry
from .ring import SampleRing

__all__ = ["GraphState", "IdentityRegistry", "SampleRing"]

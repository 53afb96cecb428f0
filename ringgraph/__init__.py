"""Scrolling braille area graphs for the terminal."""

from .config import GraphConfig, GraphStyle
from .errors import GraphValidationError
from .events import (
    Event,
    EventChannel,
    KeyMessage,
    ResizeMessage,
    TickMessage,
    UpdateMessage,
)
from .graph import GraphModel
from .rendering import GlyphQuantizer, ReflowController, RenderPipeline, ScaleResolver
from .state import GraphState, IdentityRegistry, SampleRing

__version__ = "0.1.0"

__all__ = [
    "Event",
    "EventChannel",
    "GlyphQuantizer",
    "GraphConfig",
    "GraphModel",
    "GraphState",
    "GraphStyle",
    "GraphValidationError",
    "IdentityRegistry",
    "KeyMessage",
    "ReflowController",
    "RenderPipeline",
    "ResizeMessage",
    "SampleRing",
    "ScaleResolver",
    "TickMessage",
    "UpdateMessage",
]

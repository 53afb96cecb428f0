"""Rendering components for graph display."""

from .frame import FrameBuilder
from .glyphs import BLANK_GLYPH, FULL_GLYPH, REMAINDER_GLYPHS, GlyphQuantizer
from .pipeline import RenderPipeline
from .reflow import ReflowController
from .scale import ScaleResolver
from .utils import TextUtils

__all__ = [
    "BLANK_GLYPH",
    "FULL_GLYPH",
    "REMAINDER_GLYPHS",
    "FrameBuilder",
    "GlyphQuantizer",
    "ReflowController",
    "RenderPipeline",
    "ScaleResolver",
    "TextUtils",
]

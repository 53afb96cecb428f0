"""Scrolling area graph component."""

import copy
import logging
from dataclasses import replace
from datetime import datetime

from .config import GraphConfig, GraphStyle
from .errors import require_dimension
from .events import UpdateMessage
from .rendering import FrameBuilder, ReflowController, RenderPipeline
from .state import GraphState

logger = logging.getLogger("ringgraph.graph")


class GraphModel:
    """
    A scrolling area graph bound to one component identity.

    Samples are pushed by the host with :meth:`add_next_value`, which returns
    an :class:`UpdateMessage` for the host loop to route back. Mode setters and
    :meth:`set_size` return a new model with the same identity, leaving the
    original untouched.
    """

    def __init__(self, registry, config=None, style=None):
        config = config or GraphConfig()
        self.id = registry.next_id()
        self.style = style or GraphStyle()
        # Style actually drawn; drops the frame when the area is too small for it
        self.frame_style = self.style
        self.state = GraphState(
            config.initial_width,
            fixed_ceiling=config.fixed_ceiling,
            inverted=config.inverted,
        )
        # Inner graph area, excluding padding and border
        self.width = config.initial_width
        self.height = 0

        self.pipeline = RenderPipeline()
        self.reflow = ReflowController()
        self.frame_builder = FrameBuilder()

    def __repr__(self):
        return (
            f"GraphModel(id={self.id}, width={self.width}, height={self.height}, "
            f"fixed_ceiling={self.state.fixed_ceiling}, inverted={self.state.inverted})"
        )

    def _replace(self, **changes):
        model = copy.copy(self)
        model.state = changes.pop("state") if "state" in changes else self.state.copy()
        for name, value in changes.items():
            setattr(model, name, value)
        return model

    # Configuration setters
    def with_fixed_ceiling(self, ceiling):
        return self._replace(state=self.state.with_fixed_ceiling(ceiling))

    def with_auto_scale(self):
        return self._replace(state=self.state.with_auto_scale())

    def with_inverted(self, inverted=True):
        return self._replace(state=self.state.with_inverted(inverted))

    def with_style(self, style):
        return self._replace(style=style, frame_style=style)

    @property
    def inverted(self):
        return self.state.inverted

    @property
    def observed_max(self):
        return self.state.observed_max

    def values(self):
        """Samples currently on screen, oldest first."""
        return self.state.ring.values()

    # Update cycle
    def _notify(self, value=None):
        return UpdateMessage(identity=self.id, timestamp=datetime.now(), value=value)

    def init(self):
        """Return the first notification so the host draws the graph."""
        return self._notify()

    def update(self, message):
        """Return True when ``message`` was issued by this component."""
        return isinstance(message, UpdateMessage) and message.identity == self.id

    def add_next_value(self, value):
        """Append a sample and return the notification for the host loop."""
        self.state.push(value)
        return self._notify(value)

    on_new_sample = add_next_value

    # Layout
    def set_size(self, width, height):
        """
        Resize to an outer ``width`` x ``height`` area.

        The graph area is what remains after the style's padding and border.
        An area too small to hold them is drawn without padding or border.
        """
        require_dimension("width", width)
        require_dimension("height", height)
        frame_style = self.style
        frame_width, frame_height = frame_style.frame_size()
        if width < frame_width or height < frame_height:
            frame_style = replace(self.style, padding=(0, 0, 0, 0), border=False)
            frame_width, frame_height = 0, 0
        inner_width = width - frame_width
        inner_height = height - frame_height
        logger.debug(
            "Graph %d resized to %dx%d (inner %dx%d)",
            self.id,
            width,
            height,
            inner_width,
            inner_height,
        )
        state = self.reflow.resize(self.state, inner_width, inner_height)
        return self._replace(
            state=state,
            width=inner_width,
            height=inner_height,
            frame_style=frame_style,
        )

    def resize(self, width, height):
        """Resize the inner graph area directly."""
        state = self.reflow.resize(self.state, width, height)
        return self._replace(state=state, width=width, height=height)

    # Rendering
    def render(self):
        """Render the raw glyph grid."""
        return self.pipeline.render(self.state, self.width, self.height)

    def view(self, term=None):
        """Render the grid wrapped in the configured style."""
        return self.frame_builder.render(
            self.render(), self.frame_style, width=self.width, term=term
        )

"""Terminal host loop that drives a pair of graphs."""

import logging
import math
import sys
import time
from collections import deque
from dataclasses import replace
from datetime import datetime
from threading import Lock

import blessed

from ..config import GraphConfig, GraphStyle
from ..events import EventChannel, KeyMessage, ResizeMessage, TickMessage
from ..graph import GraphModel
from ..rendering import TextUtils
from ..state import IdentityRegistry
from .differential import TerminalDifferentialRenderer
from .handlers import DashboardLogHandler
from .sources import BurstSource, WaveSource
from .terminal import TerminalStateManager, managed_terminal

QUIT_KEYS = ("q", "KEY_ESCAPE")


class GraphDashboard:
    """Fullscreen dashboard with an upright and an inverted graph."""

    def __init__(
        self,
        interval=1.0,
        ceiling=100,
        auto_scale=False,
        border=True,
        initial_width=100,
        max_log_lines=3,
        sources=None,
        term=None,
    ):
        self.term = term or blessed.Terminal()
        self.interval = interval
        self.registry = IdentityRegistry()
        self.channel = EventChannel()
        self.text_utils = TextUtils()
        self.terminal_manager = TerminalStateManager(self.term)
        self.differential_renderer = TerminalDifferentialRenderer(self.term)

        config = GraphConfig(
            initial_width=initial_width,
            fixed_ceiling=0 if auto_scale else ceiling,
        )
        self.graphs = [
            GraphModel(
                self.registry,
                config,
                GraphStyle(border=border, color=205, title="CPU"),
            ),
            GraphModel(
                self.registry,
                replace(config, inverted=True),
                GraphStyle(border=border, color=105, title="GPU"),
            ),
        ]
        if sources is None:
            if auto_scale:
                sources = [BurstSource(), BurstSource(burst_chance=0.05, ceiling=20000)]
            else:
                sources = [WaveSource(), WaveSource(period=45, phase=math.pi)]
        self.sources = sources
        for graph in self.graphs:
            self.channel.subscribe(graph.id)

        # Display state
        self.lock = Lock()
        self.log_buffer = deque(maxlen=max_log_lines)
        self.max_log_lines = max_log_lines
        self.size = (0, 0)
        self.running = False
        self.dirty = True

        # Route package logs into the log strip while running
        self.logger = logging.getLogger("ringgraph")
        self.log_handler = DashboardLogHandler(self)
        self.log_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )

    def add_log(self, message):
        """Add a log message."""
        with self.lock:
            self.log_buffer.extend(line for line in message.splitlines() if line)
            self.dirty = True

    # Event handling
    def handle(self, event):
        """Apply a host event to the dashboard."""
        if event.kind == "resize":
            self.resize(event.width, event.height)
        elif event.kind == "tick":
            self.tick()
        elif event.kind == "key":
            if event.key in QUIT_KEYS:
                self.running = False

    def resize(self, width, height):
        """Split the terminal height between the graphs and the log strip."""
        self.size = (width, height)
        log_lines = self.max_log_lines if height > self.max_log_lines * 4 else 0
        graph_height = max(height - log_lines, 0) // len(self.graphs)
        self.graphs = [graph.set_size(width, graph_height) for graph in self.graphs]
        self.differential_renderer.reset()
        self.dirty = True

    def tick(self):
        """Feed one sample to every graph and queue the notifications."""
        for graph, source in zip(self.graphs, self.sources):
            self.channel.publish(graph.add_next_value(source.sample()))

    def dispatch(self):
        """Deliver queued notifications; return True if a redraw is needed."""
        redraw = False
        for graph in self.graphs:
            for event in self.channel.drain(graph.id):
                redraw = graph.update(event) or redraw
        return redraw

    # Rendering
    def create_frame(self):
        """Compose graphs and the log strip into terminal lines."""
        width, height = self.size
        frame = []
        for graph in self.graphs:
            frame.extend(graph.view(self.term).split("\n"))

        with self.lock:
            logs = list(self.log_buffer)
        log_lines = max(height - len(frame), 0)
        logs = logs[-log_lines:] if log_lines else []
        for line in logs:
            line = self.text_utils.truncate_to_width(line, width)
            frame.append(self.text_utils.visual_ljust(line, width))
        return frame[:height]

    def _poll_size(self):
        size = (self.term.width, self.term.height)
        if size != self.size:
            self.handle(ResizeMessage(*size))

    def run(self):
        """Run the dashboard until a quit key or interrupt."""
        self.running = True
        self.terminal_manager.save_state()
        self.logger.addHandler(self.log_handler)
        propagate, self.logger.propagate = self.logger.propagate, False
        self.logger.info("Sampling every %.2fs", self.interval)

        for graph in self.graphs:
            self.channel.publish(graph.init())

        try:
            with managed_terminal(self.term, self.terminal_manager):
                next_tick = time.monotonic()
                while self.running:
                    self._poll_size()
                    key = self.term.inkey(timeout=max(0.0, next_tick - time.monotonic()))
                    if key:
                        self.handle(KeyMessage(key.name or str(key)))
                    if time.monotonic() >= next_tick:
                        self.handle(TickMessage(datetime.now()))
                        next_tick += self.interval
                    if self.dispatch() or self.dirty:
                        self.dirty = False
                        self.differential_renderer.render_frame(
                            self.create_frame(), sys.stdout
                        )
        except KeyboardInterrupt:
            pass
        finally:
            self.running = False
            self.logger.removeHandler(self.log_handler)
            self.logger.propagate = propagate

import io

import blessed
import pytest

from ringgraph import GraphState, IdentityRegistry


@pytest.fixture
def registry():
    """Fresh identity allocator for each test."""
    return IdentityRegistry()


@pytest.fixture
def term():
    """Terminal with styling disabled so frames are plain text."""
    return blessed.Terminal(kind="xterm-256color", force_styling=None)


@pytest.fixture
def make_state():
    """Build a graph state pre-filled with samples."""

    def _make(capacity, values=(), **kwargs):
        state = GraphState(capacity, **kwargs)
        for value in values:
            state.push(value)
        return state

    return _make


@pytest.fixture
def styled_term():
    """Terminal that always emits escape sequences, writing into a buffer."""
    return blessed.Terminal(
        kind="xterm-256color", stream=io.StringIO(), force_styling=True
    )

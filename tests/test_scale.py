"""Test vertical scaling and window maximum tracking."""

import pytest

from ringgraph import GraphValidationError, ScaleResolver


def test_fixed_ceiling_scales_linearly(make_state):
    """Rows are value * height // ceiling."""
    resolver = ScaleResolver(make_state(4, fixed_ceiling=100))
    assert [resolver.rows(v, 4) for v in (25, 50, 75, 100)] == [1, 2, 3, 4]
    assert resolver.mode == "fixed"
    assert resolver.denominator == 100


def test_fixed_ceiling_clamps_to_height(make_state):
    """Samples above the ceiling fill the column and no more."""
    resolver = ScaleResolver(make_state(2, fixed_ceiling=50))
    assert resolver.rows(500, 4) == 4


def test_auto_scale_uses_window_maximum(make_state):
    """Auto-scale divides by the largest sample in the ring."""
    state = make_state(3, [2, 4, 8])
    resolver = ScaleResolver(state)
    assert resolver.mode == "auto"
    assert resolver.denominator == 8
    assert [resolver.rows(v, 4) for v in state.ring] == [1, 2, 4]


def test_zero_denominator_renders_nothing(make_state):
    """An all-zero window yields zero rows without dividing by zero."""
    resolver = ScaleResolver(make_state(3))
    assert resolver.denominator == 0
    assert resolver.rows(0, 10) == 0


def test_observed_max_tracks_the_window(make_state):
    """The window maximum rises with new peaks and falls when they scroll out."""
    state = make_state(3, [1, 2, 3])
    assert state.observed_max == 3

    state.push(10)
    assert state.observed_max == 10

    state.push(4)
    state.push(5)
    assert state.observed_max == 10

    state.push(6)
    assert state.observed_max == 6


def test_fixed_ceiling_ignores_history(make_state):
    """Windows with the same samples scale identically in fixed mode."""
    scrolled = make_state(3, [999, 10, 20, 30], fixed_ceiling=100)
    fresh = make_state(3, [10, 20, 30], fixed_ceiling=100)
    assert scrolled.observed_max == fresh.observed_max == 30

    peaked = make_state(2, [500, 50], fixed_ceiling=100)
    calm = make_state(2, [100, 50], fixed_ceiling=100)
    assert ScaleResolver(peaked).rows(50, 8) == ScaleResolver(calm).rows(50, 8) == 4


def test_mode_setters_return_new_state(make_state):
    """Switching modes copies the ring instead of sharing it."""
    state = make_state(3, [1, 2, 3])
    fixed = state.with_fixed_ceiling(50)
    assert fixed.fixed_ceiling == 50 and not fixed.auto_scale
    assert state.auto_scale

    auto = fixed.with_auto_scale()
    assert auto.auto_scale
    assert auto.ring is not fixed.ring
    assert auto.ring.values() == [1, 2, 3]


def test_negative_samples_are_rejected(make_state):
    state = make_state(3)
    with pytest.raises(GraphValidationError):
        state.push(-1)
    with pytest.raises(GraphValidationError):
        state.push(1.5)
    assert state.ring.values() == [0, 0, 0]

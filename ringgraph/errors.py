"""Validation errors raised at the graph boundary."""


class GraphValidationError(ValueError):
    """Raised when a caller hands the graph malformed input."""


def require_dimension(name, value):
    """Reject dimensions that are not non-negative integers."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise GraphValidationError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise GraphValidationError(f"{name} must be non-negative, got {value}")
    return value


def require_sample(value):
    """Reject samples that are not non-negative integers."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise GraphValidationError(f"Sample must be an integer, got {value!r}")
    if value < 0:
        raise GraphValidationError(f"Sample must be non-negative, got {value}")
    return value

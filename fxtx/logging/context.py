"""Context variables for per-generator logging data.

Each generator loop runs in its own thread and so gets its own copy of
these variables; binding a generator description in one loop never leaks
into another.
"""

from contextvars import ContextVar
from typing import Any

_extra_context: ContextVar[dict[str, Any] | None] = ContextVar("extra_context", default=None)


def get_extra_context() -> dict[str, Any]:
    """Get the current extra context.

    Returns:
        Dictionary of extra context fields.
    """
    context = _extra_context.get()
    if context is None:
        return {}
    return context.copy()


def set_extra_context(**kwargs: Any) -> None:
    """Set additional context fields to include in all log messages.

    Args:
        **kwargs: Key-value pairs to include in log messages.
    """
    current = _extra_context.get()
    current = {} if current is None else current.copy()
    current.update(kwargs)
    _extra_context.set(current)


def clear_context() -> None:
    """Clear all extra context for the current thread."""
    _extra_context.set(None)

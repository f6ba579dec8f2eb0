"""Custom exception hierarchy for the typesetting engine.

Only configuration and resource problems raise. Coverage misses, degenerate
metrics, packing that cannot converge and headings that never fit all degrade
to a renderable result instead.
"""

from __future__ import annotations


class TypesetError(RuntimeError):
    """Base exception for typesetting failures."""


class FontLoadError(TypesetError):
    """Raised when a font face needed for measuring or drawing cannot be opened."""


class LayoutError(TypesetError, ValueError):
    """Raised when a layout routine receives arguments it cannot work with."""


class ConfigurationError(TypesetError):
    """Raised when a configuration payload fails validation."""


def exception_messages(exc: BaseException) -> list[str]:
    """Return the collected message chain for an exception and its causes."""
    messages: list[str] = []
    visited: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in visited:
        visited.add(id(current))
        text = str(current).strip()
        if text:
            first_line = text.splitlines()[0].strip()
            if first_line:
                messages.append(first_line)
        current = current.__cause__ or current.__context__
    return messages


__all__ = [
    "ConfigurationError",
    "FontLoadError",
    "LayoutError",
    "TypesetError",
    "exception_messages",
]

"""Layout error taxonomy.

All layout errors are configuration or programmer errors: they surface at the
call that supplied the bad value and are never retried or clamped.
"""

from __future__ import annotations


class LayoutError(Exception):
    """Base class for layout engine errors."""


class LayoutConfigError(LayoutError, ValueError):
    """Container configuration or tree-shape violation."""


class InvalidSpacing(LayoutConfigError):
    """Negative or malformed padding/gap value."""


class UnknownStrategy(LayoutConfigError):
    """Unrecognized direction, positioning or alignment tag."""


class IndexOutOfRange(LayoutError, IndexError):
    """Child accessor used with an index outside the child list."""


__all__ = [
    "IndexOutOfRange",
    "InvalidSpacing",
    "LayoutConfigError",
    "LayoutError",
    "UnknownStrategy",
]

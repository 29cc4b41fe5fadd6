"""Public layout logging API."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LayoutLoggingConfig:
    """Console handler settings for the ``uilayout`` logger."""

    level_name: str = "INFO"
    format: str = "text"  # text|json

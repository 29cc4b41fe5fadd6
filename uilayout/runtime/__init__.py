"""Layout runtime modules."""

from uilayout.runtime.config import LayoutConfig, get_layout_config, load_layout_config
from uilayout.runtime.debug_config import DebugConfig, load_debug_config
from uilayout.runtime.errors import (
    IndexOutOfRange,
    InvalidSpacing,
    LayoutConfigError,
    LayoutError,
    UnknownStrategy,
)
from uilayout.runtime.events import LayoutEventDispatcher
from uilayout.runtime.logging import get_layout_logger, setup_layout_logging

__all__ = [
    "DebugConfig",
    "IndexOutOfRange",
    "InvalidSpacing",
    "LayoutConfig",
    "LayoutConfigError",
    "LayoutError",
    "LayoutEventDispatcher",
    "UnknownStrategy",
    "get_layout_config",
    "get_layout_logger",
    "load_debug_config",
    "load_layout_config",
    "setup_layout_logging",
]

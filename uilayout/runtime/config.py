"""Centralized runtime configuration ownership for layout execution."""

from __future__ import annotations

import os
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Mapping

DEFAULT_CANVAS_WIDTH = 1200
DEFAULT_CANVAS_HEIGHT = 720


@dataclass(frozen=True, slots=True)
class LayoutCanvasConfig:
    width: float
    height: float


@dataclass(frozen=True, slots=True)
class LayoutConfig:
    canvas: LayoutCanvasConfig
    trace_enabled: bool


_LAYOUT_CONFIG: ContextVar[LayoutConfig | None] = ContextVar("uilayout_config", default=None)


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _flag(name: str, default: bool, *, env: Mapping[str, str] | None = None) -> bool:
    raw = _raw(name, env=env)
    if raw is None:
        return bool(default)
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return bool(default)


def _float(
    name: str,
    default: float,
    *,
    minimum: float | None = None,
    env: Mapping[str, str] | None = None,
) -> float:
    raw = _raw(name, env=env)
    if raw is None:
        value = float(default)
    else:
        try:
            value = float(raw.strip())
        except ValueError:
            value = float(default)
    if minimum is None:
        return value
    return max(float(minimum), value)


def _text(name: str, default: str, *, env: Mapping[str, str] | None = None) -> str:
    raw = _raw(name, env=env)
    if raw is None:
        return str(default)
    value = raw.strip()
    return value if value else str(default)


def _resolution(raw: str) -> tuple[int, int] | None:
    value = str(raw).strip().lower()
    if not value:
        return None
    normalized = value.replace(" ", "")
    for sep in ("x", ",", ":"):
        if sep in normalized:
            left, right = normalized.split(sep, 1)
            try:
                width = max(1, int(left))
                height = max(1, int(right))
            except ValueError:
                return None
            return (width, height)
    return None


def load_layout_config(*, env: Mapping[str, str] | None = None) -> LayoutConfig:
    resolution = _resolution(_text("UILAYOUT_CANVAS_RESOLUTION", "", env=env))
    if resolution is not None:
        width, height = float(resolution[0]), float(resolution[1])
    else:
        width = _float("UILAYOUT_CANVAS_WIDTH", DEFAULT_CANVAS_WIDTH, minimum=1.0, env=env)
        height = _float("UILAYOUT_CANVAS_HEIGHT", DEFAULT_CANVAS_HEIGHT, minimum=1.0, env=env)
    return LayoutConfig(
        canvas=LayoutCanvasConfig(width=width, height=height),
        trace_enabled=_flag("UILAYOUT_DEBUG_LAYOUT_TRACE", False, env=env),
    )


def initialize_layout_config(*, env: Mapping[str, str] | None = None) -> LayoutConfig:
    config = load_layout_config(env=env)
    _LAYOUT_CONFIG.set(config)
    return config


def set_layout_config(config: LayoutConfig) -> LayoutConfig:
    _LAYOUT_CONFIG.set(config)
    return config


def get_layout_config() -> LayoutConfig:
    config = _LAYOUT_CONFIG.get()
    if config is not None:
        return config
    return initialize_layout_config()


__all__ = [
    "DEFAULT_CANVAS_HEIGHT",
    "DEFAULT_CANVAS_WIDTH",
    "LayoutCanvasConfig",
    "LayoutConfig",
    "get_layout_config",
    "initialize_layout_config",
    "load_layout_config",
    "set_layout_config",
]

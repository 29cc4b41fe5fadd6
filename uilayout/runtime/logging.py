"""Logging for the layout package.

Layout code logs a short event name (``layout_container``,
``layout_pass_complete``, ``resize_applied``) and passes the numbers as
``extra`` fields. Both formatters render those fields.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TextIO

from uilayout.api.logging import LayoutLoggingConfig
from uilayout.diagnostics.json_codec import dumps_text
from uilayout.runtime.debug_config import load_debug_config

LAYOUT_LOGGER = "uilayout"
LAYOUT_FIELDS = (
    "container",
    "pass_count",
    "origin_x",
    "origin_y",
    "strategy",
    "alignment",
    "available",
    "width",
    "height",
    "dpi_scale",
)
_HANDLER_NAME = "uilayout.console"


def layout_fields(record: logging.LogRecord) -> dict[str, object]:
    """Return the layout fields attached to a record, in declaration order."""
    return {name: getattr(record, name) for name in LAYOUT_FIELDS if hasattr(record, name)}


class TextFormatter(logging.Formatter):
    """One line per record with layout fields appended as ``key=value``."""

    def __init__(self) -> None:
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")

    def formatMessage(self, record: logging.LogRecord) -> str:
        line = super().formatMessage(record)
        fields = layout_fields(record)
        if not fields:
            return line
        rendered = " ".join(f"{name}={_render(value)}" for name, value in fields.items())
        return f"{line} {rendered}"


class JsonFormatter(logging.Formatter):
    """One JSON object per record; layout fields go under ``fields``."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        fields = layout_fields(record)
        if fields:
            payload["fields"] = fields
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return dumps_text(payload)


def setup_layout_logging(
    config: LayoutLoggingConfig | None = None,
    *,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Attach one console handler to the ``uilayout`` logger and return the logger.

    Calling it again replaces the handler installed by the previous call.
    Handlers added by the application are left alone. Without a config the
    level comes from ``UILAYOUT_LOG_LEVEL`` or ``LOG_LEVEL``.
    """
    if config is None:
        config = LayoutLoggingConfig(level_name=load_debug_config().log_level)
    logger = logging.getLogger(LAYOUT_LOGGER)
    for existing in [h for h in logger.handlers if h.get_name() == _HANDLER_NAME]:
        logger.removeHandler(existing)
    handler = logging.StreamHandler(stream)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(_resolve_formatter(config.format))
    logger.addHandler(handler)
    logger.setLevel(logging.getLevelNamesMapping().get(config.level_name.strip().upper(), logging.INFO))
    return logger


def get_layout_logger(name: str) -> logging.Logger:
    """Return namespaced logger instance."""
    return logging.getLogger(name)


def _resolve_formatter(kind: str) -> logging.Formatter:
    if kind.strip().lower() == "json":
        return JsonFormatter()
    return TextFormatter()


def _render(value: object) -> str:
    if isinstance(value, float):
        return f"{value:.2f}"
    return str(value)


__all__ = [
    "JsonFormatter",
    "LAYOUT_FIELDS",
    "LAYOUT_LOGGER",
    "TextFormatter",
    "get_layout_logger",
    "layout_fields",
    "setup_layout_logging",
]

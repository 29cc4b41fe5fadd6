from __future__ import annotations

import io
import logging

import pytest

from uilayout.api.logging import LayoutLoggingConfig
from uilayout.diagnostics.json_codec import loads
from uilayout.layout.layout_tree import UILayoutTree
from uilayout.runtime.logging import (
    LAYOUT_LOGGER,
    JsonFormatter,
    TextFormatter,
    setup_layout_logging,
)


@pytest.fixture
def layout_logger():
    logger = logging.getLogger(LAYOUT_LOGGER)
    original_handlers = list(logger.handlers)
    original_level = logger.level
    yield logger
    logger.handlers.clear()
    logger.handlers.extend(original_handlers)
    logger.setLevel(original_level)


def _record(msg: str, **fields: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="uilayout.layout.layout_tree",
        level=logging.DEBUG,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for name, value in fields.items():
        setattr(record, name, value)
    return record


def test_setup_uses_debug_config_level_and_replaces_its_own_handler(monkeypatch, layout_logger) -> None:
    sentinel = logging.NullHandler()
    layout_logger.addHandler(sentinel)
    monkeypatch.setenv("UILAYOUT_LOG_LEVEL", "DEBUG")

    setup_layout_logging()
    logger = setup_layout_logging()

    assert logger is layout_logger
    assert logger.level == logging.DEBUG
    assert sentinel in logger.handlers
    assert len(logger.handlers) == 2


def test_unknown_level_name_falls_back_to_info(layout_logger) -> None:
    setup_layout_logging(LayoutLoggingConfig(level_name="chatty"))
    assert layout_logger.level == logging.INFO


def test_text_formatter_appends_layout_fields() -> None:
    line = TextFormatter().format(
        _record("layout_pass_complete", container="root", pass_count=3, width=600.0, other="x")
    )
    assert line.endswith("layout_pass_complete container=root pass_count=3 width=600.00")


def test_json_formatter_keeps_only_layout_fields() -> None:
    payload = loads(
        JsonFormatter().format(_record("layout_container", container="bar", available=580.0, other=1))
    )

    assert payload["level"] == "DEBUG"
    assert payload["logger"] == "uilayout.layout.layout_tree"
    assert payload["msg"] == "layout_container"
    assert payload["fields"] == {"container": "bar", "available": 580.0}


def test_layout_pass_is_written_as_json(layout_logger) -> None:
    stream = io.StringIO()
    setup_layout_logging(LayoutLoggingConfig(level_name="DEBUG", format="json"), stream=stream)

    UILayoutTree(width=320, height=200).update()

    payload = loads(stream.getvalue().splitlines()[-1])
    assert payload["msg"] == "layout_pass_complete"
    assert payload["fields"] == {"container": "root", "pass_count": 1, "width": 320.0, "height": 200.0}

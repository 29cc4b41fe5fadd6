from __future__ import annotations

import pytest

from uilayout.runtime.config import load_layout_config, set_layout_config


@pytest.fixture(autouse=True)
def _default_layout_config() -> None:
    set_layout_config(load_layout_config(env={}))

from __future__ import annotations

import pytest

from uilayout.api.layout import AlignmentStrategy
from uilayout.layout.alignment import ALIGNMENTS, cross_axis_offset
from uilayout.runtime.errors import UnknownStrategy


def test_alignment_modes() -> None:
    assert cross_axis_offset("anchor-start", 400, 100) == 0.0
    assert cross_axis_offset("center", 400, 100) == 150.0
    assert cross_axis_offset("anchor-end", 400, 100) == 300.0


def test_alignment_accepts_enum_members() -> None:
    assert cross_axis_offset(AlignmentStrategy.CENTER, 50, 10) == 20.0


def test_oversized_child_gets_negative_offset() -> None:
    assert cross_axis_offset("center", 100, 140) == -20.0
    assert cross_axis_offset("anchor-end", 100, 140) == -40.0


def test_every_alignment_has_a_function() -> None:
    assert set(ALIGNMENTS) == set(AlignmentStrategy)


def test_unknown_alignment_is_rejected() -> None:
    with pytest.raises(UnknownStrategy):
        cross_axis_offset("stretch", 100, 10)

from __future__ import annotations

import pytest

from uilayout.api.layout import PositionStrategy
from uilayout.layout.distribution import STRATEGIES, main_axis_offsets
from uilayout.runtime.errors import LayoutConfigError, UnknownStrategy


def test_anchor_start_packs_from_zero_with_gaps() -> None:
    assert main_axis_offsets("anchor-start", [10, 20, 30], 100, 5) == [0.0, 15.0, 40.0]


def test_anchor_end_packs_against_available_length() -> None:
    offsets = main_axis_offsets("anchor-end", [10, 20, 30], 100, 5)
    assert offsets == [30.0, 45.0, 70.0]
    assert offsets[-1] + 30 == 100


def test_center_leaves_equal_space_on_both_sides() -> None:
    sizes = [10, 20, 30]
    offsets = main_axis_offsets("center", sizes, 100, 5)
    leading = offsets[0]
    trailing = 100 - (offsets[-1] + sizes[-1])
    assert offsets == pytest.approx([15.0, 30.0, 55.0])
    assert leading == pytest.approx(trailing)


def test_space_between_scenario() -> None:
    assert main_axis_offsets("space-between", [100, 100, 100], 600, 0) == [0.0, 250.0, 500.0]


def test_space_between_pins_both_edges() -> None:
    sizes = [30, 70, 10, 45]
    offsets = main_axis_offsets("space-between", sizes, 500, 12)
    assert offsets[0] == 0.0
    assert offsets[-1] + sizes[-1] == pytest.approx(500)


def test_space_between_single_child_matches_anchor_start() -> None:
    between = main_axis_offsets("space-between", [50], 200, 10)
    start = main_axis_offsets("anchor-start", [50], 200, 10)
    assert between == start == [0.0]


def test_space_around_uses_half_units_at_the_edges() -> None:
    offsets = main_axis_offsets("space-around", [100, 100], 600)
    assert offsets == pytest.approx([100.0, 400.0])
    trailing = 600 - (offsets[-1] + 100)
    assert trailing == pytest.approx(100.0)


def test_space_evenly_scenario() -> None:
    offsets = main_axis_offsets("space-evenly", [100, 100], 600)
    assert offsets == pytest.approx([133.3333333, 366.6666667])


def test_space_evenly_gaps_are_all_equal() -> None:
    sizes = [15, 40, 25, 60]
    available = 410
    offsets = main_axis_offsets("space-evenly", sizes, available)
    edges = [0.0]
    for offset, size in zip(offsets, sizes):
        edges.extend([offset, offset + size])
    edges.append(float(available))
    gaps = [edges[i + 1] - edges[i] for i in range(0, len(edges), 2)]
    assert len(gaps) == len(sizes) + 1
    assert gaps == pytest.approx([gaps[0]] * len(gaps))


def test_fixed_returns_current_offsets_unchanged() -> None:
    assert main_axis_offsets("fixed", [10, 10], 100, 8, current=[42, 7]) == [42.0, 7.0]
    assert main_axis_offsets("fixed", [10, 10], 100) == [0.0, 0.0]


def test_fixed_rejects_mismatched_current_offsets() -> None:
    with pytest.raises(LayoutConfigError):
        main_axis_offsets("fixed", [10, 10], 100, current=[1])


@pytest.mark.parametrize("strategy", list(PositionStrategy))
def test_empty_child_list_yields_no_offsets(strategy: PositionStrategy) -> None:
    assert main_axis_offsets(strategy, [], 100, 4) == []


def test_overflow_is_not_clamped() -> None:
    assert main_axis_offsets("space-between", [400, 400], 600) == [0.0, 200.0]
    assert main_axis_offsets("center", [400], 200) == [-100.0]
    offsets = main_axis_offsets("space-evenly", [300, 300], 300)
    assert offsets == pytest.approx([-100.0, 100.0])


def test_offsets_are_plain_floats() -> None:
    offsets = main_axis_offsets("space-around", [1, 2, 3], 60, 0)
    assert all(type(value) is float for value in offsets)


def test_every_strategy_has_a_function() -> None:
    assert set(STRATEGIES) == set(PositionStrategy)


def test_unknown_strategy_is_rejected() -> None:
    with pytest.raises(UnknownStrategy):
        main_axis_offsets("space-randomly", [10], 100)

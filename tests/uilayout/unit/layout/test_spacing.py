from __future__ import annotations

import pytest

from uilayout.api.layout import LayoutDirection
from uilayout.layout.spacing import Gap, Padding, resolve_gap, resolve_padding
from uilayout.runtime.errors import InvalidSpacing, LayoutConfigError


def test_scalar_padding_applies_to_all_sides() -> None:
    assert resolve_padding(8) == Padding(8.0, 8.0, 8.0, 8.0)


def test_partial_padding_defaults_missing_sides_to_zero() -> None:
    padding = resolve_padding({"top": 4, "left": 12})
    assert padding == Padding(top=4.0, right=0.0, bottom=0.0, left=12.0)


def test_padding_instance_is_revalidated() -> None:
    assert resolve_padding(Padding(1, 2, 3, 4)) == Padding(1.0, 2.0, 3.0, 4.0)
    with pytest.raises(InvalidSpacing):
        resolve_padding(Padding(top=-1))


def test_scalar_and_partial_gap() -> None:
    assert resolve_gap(6) == Gap(6.0, 6.0)
    assert resolve_gap({"vertical": 3}) == Gap(horizontal=0.0, vertical=3.0)
    assert resolve_gap({}) == Gap(0.0, 0.0)


@pytest.mark.parametrize(
    "value",
    [-1, {"right": -0.5}, {"top": 1, "bottom": -2}, float("nan"), "4", True, None],
)
def test_invalid_padding_is_rejected(value: object) -> None:
    with pytest.raises(InvalidSpacing):
        resolve_padding(value)  # type: ignore[arg-type]


@pytest.mark.parametrize("value", [-3, {"horizontal": -1}, {"row": 2}, float("inf")])
def test_invalid_gap_is_rejected(value: object) -> None:
    with pytest.raises(InvalidSpacing):
        resolve_gap(value)  # type: ignore[arg-type]


def test_unknown_padding_key_is_rejected() -> None:
    with pytest.raises(InvalidSpacing, match="unknown padding keys: middle"):
        resolve_padding({"top": 1, "middle": 2})


def test_invalid_spacing_is_a_config_error() -> None:
    with pytest.raises(LayoutConfigError):
        resolve_gap(-1)
    with pytest.raises(ValueError):
        resolve_gap(-1)


def test_axis_helpers_follow_layout_direction() -> None:
    padding = Padding(top=1, right=2, bottom=3, left=4)
    gap = Gap(horizontal=10, vertical=20)

    assert padding.main(LayoutDirection.HORIZONTAL) == (4, 2)
    assert padding.cross(LayoutDirection.HORIZONTAL) == (1, 3)
    assert padding.main(LayoutDirection.VERTICAL) == (1, 3)
    assert padding.cross(LayoutDirection.VERTICAL) == (4, 2)
    assert gap.along(LayoutDirection.HORIZONTAL) == 10
    assert gap.along(LayoutDirection.VERTICAL) == 20

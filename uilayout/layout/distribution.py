"""Main-axis distribution strategies.

Every strategy maps ordered child main sizes onto ordered start offsets
relative to the content-box origin. Overflowing children (negative free space)
follow the same formulas; nothing is clamped or shrunk.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

import numpy as np

from uilayout.api.layout import PositionStrategy
from uilayout.runtime.errors import LayoutConfigError

StrategyFn = Callable[[np.ndarray, float, float, np.ndarray], np.ndarray]


def _pack(sizes: np.ndarray, start: float, spacing: float) -> np.ndarray:
    """Place children back to back from `start`, `spacing` apart."""
    advances = np.cumsum(sizes + spacing)
    return start + np.concatenate(([0.0], advances[:-1]))


def _content_length(sizes: np.ndarray, gap: float) -> float:
    return float(sizes.sum()) + gap * (len(sizes) - 1)


def _fixed(sizes: np.ndarray, available: float, gap: float, current: np.ndarray) -> np.ndarray:
    return current


def _anchor_start(
    sizes: np.ndarray, available: float, gap: float, current: np.ndarray
) -> np.ndarray:
    return _pack(sizes, 0.0, gap)


def _anchor_end(sizes: np.ndarray, available: float, gap: float, current: np.ndarray) -> np.ndarray:
    return _pack(sizes, available - _content_length(sizes, gap), gap)


def _center(sizes: np.ndarray, available: float, gap: float, current: np.ndarray) -> np.ndarray:
    return _pack(sizes, (available - _content_length(sizes, gap)) / 2.0, gap)


def _space_between(
    sizes: np.ndarray, available: float, gap: float, current: np.ndarray
) -> np.ndarray:
    count = len(sizes)
    if count == 1:
        return _anchor_start(sizes, available, gap, current)
    step = (available - float(sizes.sum())) / (count - 1)
    return _pack(sizes, 0.0, step)


def _space_around(
    sizes: np.ndarray, available: float, gap: float, current: np.ndarray
) -> np.ndarray:
    free = (available - float(sizes.sum())) / len(sizes)
    return _pack(sizes, free / 2.0, free)


def _space_evenly(
    sizes: np.ndarray, available: float, gap: float, current: np.ndarray
) -> np.ndarray:
    free = (available - float(sizes.sum())) / (len(sizes) + 1)
    return _pack(sizes, free, free)


STRATEGIES: dict[PositionStrategy, StrategyFn] = {
    PositionStrategy.FIXED: _fixed,
    PositionStrategy.ANCHOR_START: _anchor_start,
    PositionStrategy.ANCHOR_END: _anchor_end,
    PositionStrategy.CENTER: _center,
    PositionStrategy.SPACE_BETWEEN: _space_between,
    PositionStrategy.SPACE_AROUND: _space_around,
    PositionStrategy.SPACE_EVENLY: _space_evenly,
}


def main_axis_offsets(
    strategy: PositionStrategy | str,
    sizes: Sequence[float],
    available: float,
    gap: float = 0.0,
    current: Sequence[float] | None = None,
) -> list[float]:
    """Return one main-axis start offset per child, in child order.

    `current` holds the children's existing main-axis offsets and is only read
    by the fixed strategy; it defaults to zeros.
    """
    resolved = PositionStrategy.parse(strategy)
    count = len(sizes)
    if count == 0:
        return []
    size_array = np.asarray(sizes, dtype=np.float64)
    if current is None:
        current_array = np.zeros(count, dtype=np.float64)
    else:
        current_array = np.asarray(current, dtype=np.float64)
        if current_array.shape != size_array.shape:
            raise LayoutConfigError(
                f"expected {count} current offsets, got {len(current_array)}"
            )
    offsets = STRATEGIES[resolved](size_array, float(available), float(gap), current_array)
    return [float(value) for value in offsets]


__all__ = ["STRATEGIES", "StrategyFn", "main_axis_offsets"]

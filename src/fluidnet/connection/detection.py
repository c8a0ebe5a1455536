from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

import numpy as np

from fluidnet.common import clamp


@runtime_checkable
class ThresholdDetector(Protocol):
    """Decides whether a write moved a connection into a new capacity band.

    ``levels`` are absolute amounts (band fraction times capacity) in
    ascending order. Returns the index of the band reached, or None when
    nothing should fire. ``old`` and ``new`` are never equal.
    """

    def detect(self, levels: Sequence[float], current_index: int, old: float, new: float) -> int | None: ...


@dataclass(frozen=True)
class AdjacentBand:
    """Look one band ahead in the direction of travel.

    A write that skips several bands still advances by one band only; the
    next write in the same direction catches up one more. At either end of
    the table the candidate is clamped, so writes beyond it re-report the
    end band.
    """

    def detect(self, levels: Sequence[float], current_index: int, old: float, new: float) -> int | None:
        direction = 1 if old < new else -1
        candidate = clamp(current_index + direction, 0, len(levels) - 1)
        level = levels[candidate]

        if (direction > 0 and new >= level) or (direction < 0 and new <= level):
            return candidate
        return None


@dataclass(frozen=True)
class CrossedBands:
    """Jump straight to the furthest band crossed by the write.

    Still reports at most one band per write, but never lags behind the
    stored amount. Only fires when the band actually changes.
    """

    def detect(self, levels: Sequence[float], current_index: int, old: float, new: float) -> int | None:
        arr = np.asarray(levels, dtype=float)
        if new > old:
            candidate = int(np.searchsorted(arr, new, side="right")) - 1
            return candidate if candidate > current_index else None

        candidate = min(int(np.searchsorted(arr, new, side="left")), len(arr) - 1)
        return candidate if candidate < current_index else None


def band_index(levels: Sequence[float], value: float) -> int:
    """Highest band whose level is at or below ``value``.

    A table whose levels are all zero (no storage) always maps to band 0.
    """
    arr = np.asarray(levels, dtype=float)
    if arr.size == 0 or arr[-1] <= 0:
        return 0
    return max(0, int(np.searchsorted(arr, value, side="right")) - 1)

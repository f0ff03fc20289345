"""
Scale strategies used to encode the dataset visually.

Three kinds are enough for the heat map:
- Band: discrete category domain -> equal, contiguous pixel bands
- Linear: continuous domain -> continuous range (pixels, or a colormap)
- Threshold: continuous domain split at ordered thresholds -> discrete colors

Behavior mirrors the d3-scale defaults the chart was designed against
(zero band padding, unclamped linear maps, midpoint output for a degenerate
linear domain, right-side searchsorted threshold lookup).
"""

from typing import Hashable, Optional, Sequence

import numpy as np
from matplotlib.colors import LinearSegmentedColormap, to_hex

from heatmap.config import MONTH_NAMES


def month_name(month: int) -> str:
    """Full English month name for a 1-based month index."""
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be in 1-12, got {month}")
    return MONTH_NAMES[month - 1]


class BandScale:
    """Maps each category of the domain to the start of an equal-width band."""

    def __init__(self, domain: Sequence[Hashable], range_: tuple[float, float]):
        # Duplicates collapse to their first occurrence
        self.domain = list(dict.fromkeys(domain))
        self.range = (float(range_[0]), float(range_[1]))
        self._index = {value: i for i, value in enumerate(self.domain)}

        start, stop = self.range
        self.step = (stop - start) / max(1, len(self.domain))
        self.bandwidth = self.step

    def __call__(self, value: Hashable) -> Optional[float]:
        i = self._index.get(value)
        if i is None:
            return None
        return self.range[0] + self.step * i

    def center(self, value: Hashable) -> Optional[float]:
        start = self(value)
        if start is None:
            return None
        return start + self.bandwidth / 2


class LinearScale:
    """Continuous linear map from a two-value domain onto a numeric range."""

    def __init__(self, domain: tuple[float, float], range_: tuple[float, float]):
        self.domain = (float(domain[0]), float(domain[1]))
        self.range = (float(range_[0]), float(range_[1]))

    def normalize(self, value: float) -> float:
        """Position of value within the domain as 0..1 (0.5 when degenerate)."""
        d0, d1 = self.domain
        if d1 == d0:
            return 0.5
        return (value - d0) / (d1 - d0)

    def __call__(self, value: float) -> float:
        r0, r1 = self.range
        return r0 + (r1 - r0) * self.normalize(value)


class ColorScale(LinearScale):
    """Two-stop linear colormap over the domain, returned as #rrggbb."""

    def __init__(self, domain: tuple[float, float], colors: tuple[str, str]):
        super().__init__(domain, (0.0, 1.0))
        self.colors = colors
        # Raises ValueError for anything matplotlib cannot parse as a color
        self.cmap = LinearSegmentedColormap.from_list("variance", list(colors))

    def __call__(self, value: float) -> str:
        return to_hex(self.cmap(self.normalize(value)))


class ThresholdScale:
    """
    Maps a continuous value to one of len(thresholds) + 1 outputs.

    colors[0] covers values below thresholds[0], colors[i] covers
    [thresholds[i-1], thresholds[i]), and colors[-1] everything from the last
    threshold up.
    """

    def __init__(self, thresholds: Sequence[float], colors: Sequence[str]):
        if len(colors) != len(thresholds) + 1:
            raise ValueError(
                f"Threshold scale needs {len(thresholds) + 1} colors, got {len(colors)}"
            )
        self.thresholds = np.asarray(thresholds, dtype=float)
        self.colors = list(colors)

    def __call__(self, value: float) -> str:
        return self.colors[int(np.searchsorted(self.thresholds, value, side="right"))]

    def invert_extent(self, color: str) -> tuple[Optional[float], Optional[float]]:
        """Thresholds bounding a color's bucket; None marks an open end."""
        i = self.colors.index(color)
        lo = float(self.thresholds[i - 1]) if i > 0 else None
        hi = float(self.thresholds[i]) if i < len(self.thresholds) else None
        return lo, hi

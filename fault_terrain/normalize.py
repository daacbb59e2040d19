# fault_terrain/normalize.py

"""
================================================================================
HEIGHT NORMALIZATION
================================================================================
Linearly rescales displaced heights into a fixed symmetric range.

Data Contract:
---------------
- Inputs:
    - positions (np.ndarray): float64 (N*N, 3), writable.
    - half_range (float): The target half-range c. Heights end in [-c, c].
- Outputs: None. The y column of positions is rescaled in place so the lowest
  vertex sits at -c and the highest at +c.
- Side Effects: None beyond the in-place edit.
- Invariants: If every height is equal there is no range to scale against;
  DegenerateRange is raised and the heights are left untouched.
================================================================================
"""

import numpy as np

from . import config as DEFAULTS
from .errors import DegenerateRange


def height_range(positions: np.ndarray) -> tuple[float, float]:
    """Returns (min, max) of the y column. An empty grid reports (0.0, 0.0)."""
    if len(positions) == 0:
        return 0.0, 0.0
    heights = positions[:, 1]
    return float(heights.min()), float(heights.max())


def normalize_heights(positions: np.ndarray, half_range: float = DEFAULTS.HEIGHT_HALF_RANGE):
    """
    Rescales the y column of positions in place into [-half_range, half_range].

    y' = c * (y - midpoint) / (0.5 * (max - min)), where midpoint = 0.5 * (max + min).

    Raises:
        DegenerateRange: If max == min. The positions are not modified.
    """
    low, high = height_range(positions)
    if high == low:
        raise DegenerateRange(low)

    midpoint = 0.5 * (high + low)
    half_span = 0.5 * (high - low)
    positions[:, 1] = half_range * (positions[:, 1] - midpoint) / half_span
